"""Package metadata and fixed policy constants."""

from __future__ import annotations

import re

PACKAGE_VERSION = "0.1.0"

THIRD_PARTY_DIR = "node_modules"

# Script blocks extracted from single-file components, e.g. `App.vue.js`.
COMPONENT_SCRIPT_PATTERN = re.compile(r"\.vue\.jsx?$")
SCRIPT_RULE_TEST = re.compile(r"\.m?jsx?$")
SCRIPT_RULE_NAME = "js"

SERVICE_PACKAGE = "@vue/cli-service"
COMPILER_PACKAGE = "@babel/core"
PRESET_PACKAGE = "@vue/babel-preset-app"
COMPILER_LOADER = "babel-loader"
WORKER_LOADER = "thread-loader"

RUNTIME_HELPER_FRAGMENTS = ("@babel/runtime", "@babel\\runtime")

CACHE_CONFIG_FILES = ("babel.config.js", ".browserslistrc")
PARTIAL_CONFIG_ENTRY = "src/main.js"

ENV_MODE = "NODE_ENV"
ENV_TRANSPILE_RUNTIME = "VUE_CLI_TRANSPILE_BABEL_RUNTIME"
ENV_MODERN_BUILD = "VUE_CLI_MODERN_BUILD"
ENV_PARALLEL_OVERRIDE = "TRANSPILEGATE_PARALLEL"
ENV_DISABLE_DOTENV = "TRANSPILEGATE_DISABLE_DOTENV"
