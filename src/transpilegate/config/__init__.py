"""Configuration exports."""

from transpilegate.config.loader import (
    DEFAULT_CONFIG_PATH,
    load_build_environment,
    load_plugin_options,
)
from transpilegate.config.models import BuildEnvironment, PluginOptions

__all__ = [
    "BuildEnvironment",
    "DEFAULT_CONFIG_PATH",
    "PluginOptions",
    "load_build_environment",
    "load_plugin_options",
]
