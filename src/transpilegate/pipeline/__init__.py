"""Pipeline wiring exports."""

from transpilegate.pipeline.host import LocalPluginHost, PluginHost
from transpilegate.pipeline.rules import LoaderUse, ScriptRule
from transpilegate.pipeline.wiring import TranspilePlugin

__all__ = ["LoaderUse", "LocalPluginHost", "PluginHost", "ScriptRule", "TranspilePlugin"]
