"""Transpile plugin wiring for the bundler's script rule."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Mapping

from transpilegate.config.loader import load_build_environment
from transpilegate.config.models import BuildEnvironment, PluginOptions
from transpilegate.constants import (
    COMPILER_LOADER,
    PARTIAL_CONFIG_ENTRY,
    SCRIPT_RULE_NAME,
    SCRIPT_RULE_TEST,
    SERVICE_PACKAGE,
    THIRD_PARTY_DIR,
    WORKER_LOADER,
)
from transpilegate.pipeline.host import PluginHost
from transpilegate.pipeline.rules import ScriptRule
from transpilegate.policy.concurrency import decide_concurrency
from transpilegate.policy.fingerprint import build_cache_fingerprint
from transpilegate.policy.inclusion import InclusionContext, InclusionPredicate
from transpilegate.policy.specifiers import compile_specifiers

LOGGER = logging.getLogger(__name__)


class TranspilePlugin:
    """Configure which scripts the compiler stage sees, and how."""

    def __init__(
        self,
        host: PluginHost,
        options: PluginOptions | None = None,
        *,
        env: Mapping[str, str] | None = None,
        plugin_root: Path | None = None,
    ) -> None:
        self.host = host
        self.options = options or PluginOptions()
        self.plugin_root = plugin_root
        self._env = env

    def apply(self) -> ScriptRule:
        """Build the script rule and register it with the host."""
        matcher = compile_specifiers(self.options.transpile_dependencies)

        # The default preset flags runtime-helper injection while its config
        # loads, so the environment is read only after this call.
        self.host.load_partial_compiler_config(
            self.host.resolve(PARTIAL_CONFIG_ENTRY)
        )
        environment = self._read_environment()

        if self.plugin_root is not None:
            self.host.prepend_loader_path(str(self.plugin_root / THIRD_PARTY_DIR))

        predicate = InclusionPredicate.build(
            InclusionContext(
                service_root=self.host.package_dir(SERVICE_PACKAGE),
                transpile_runtime_helpers=environment.transpile_runtime_helpers,
            ),
            matcher,
        )
        rule = ScriptRule(name=SCRIPT_RULE_NAME, test=SCRIPT_RULE_TEST)
        rule.exclude.append(predicate)

        concurrency = decide_concurrency(
            production=environment.production,
            parallel=self.options.parallel,
        )
        if concurrency.enabled:
            rule.use(
                WORKER_LOADER,
                self.host.resolve_loader(WORKER_LOADER),
                concurrency.loader_options(),
            )
            LOGGER.debug(
                "Worker dispatch enabled (workers=%s)",
                concurrency.worker_count or "default",
            )

        fingerprint = build_cache_fingerprint(self.host, environment)
        cache_config = self.host.gen_cache_config(COMPILER_LOADER, fingerprint)
        rule.use(
            COMPILER_LOADER,
            self.host.resolve_loader(COMPILER_LOADER),
            cache_config.as_loader_options(),
        )

        self.host.register_rule(rule)
        LOGGER.debug("Registered %r rule with stages %s", rule.name, rule.use_names())
        return rule

    def _read_environment(self) -> BuildEnvironment:
        return load_build_environment(self._env)
