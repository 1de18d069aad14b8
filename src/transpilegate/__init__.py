"""transpilegate package entrypoints."""

from transpilegate.config import PluginOptions, load_plugin_options
from transpilegate.constants import PACKAGE_VERSION
from transpilegate.pipeline import LocalPluginHost, TranspilePlugin
from transpilegate.runtime_env import load_runtime_env

__all__ = [
    "LocalPluginHost",
    "PluginOptions",
    "TranspilePlugin",
    "__version__",
    "load_plugin_options",
    "load_runtime_env",
]
__version__ = PACKAGE_VERSION
