"""Composition root for build environment resolution.

Resolution happens in two phases that must run in order:

1. ``load_environment()``: apply layered dotenv files, then normalize the
   module search path.
2. ``compute_paths()`` / ``client_environment()``: read the settled context.

Usage:
    from buildenv import load_environment

    build_env = load_environment()
    client = build_env.client_environment(public_url="/static")
    define_values = client.stringified
"""

from __future__ import annotations

from typing import Optional

from buildenv.config.context import EnvironmentContext
from buildenv.config.paths import AppPaths, compute_paths
from buildenv.config.settings import EnvSettings
from buildenv.env.loader import SourceLoader
from buildenv.env.module_path import normalize_module_path
from buildenv.env.projector import ClientEnvironment, get_client_environment
from buildenv.env.reader import DotenvReader
from buildenv.exceptions import ConfigurationError
from buildenv.logger import Logger, get_logger


class BuildEnvironment:
    """Owns the environment context and runs the resolution phases."""

    def __init__(
        self,
        context: Optional[EnvironmentContext] = None,
        settings: Optional[EnvSettings] = None,
        logger: Optional[Logger] = None,
        reader: Optional[DotenvReader] = None,
    ) -> None:
        self.context = context if context is not None else EnvironmentContext.from_os_environ()
        self.settings = settings or EnvSettings()
        self.logger = logger or get_logger()
        self.reader = reader or DotenvReader()
        self._loaded = False

    @property
    def loaded(self) -> bool:
        return self._loaded

    @property
    def mode(self) -> str:
        return self.context.get(self.settings.mode_var) or self.settings.default_mode

    def load_environment(self) -> EnvironmentContext:
        """Load dotenv files and normalize the module path. Runs once."""
        if self._loaded:
            return self.context

        SourceLoader(self.settings, reader=self.reader, logger=self.logger).load(self.context)
        normalize_module_path(
            self.context,
            var_name=self.settings.module_path_var,
            cwd=self.settings.resolve_app_directory(),
            logger=self.logger,
        )
        self._loaded = True
        self.logger.info("Build environment loaded", mode=self.mode)
        return self.context

    def _require_loaded(self, operation: str) -> None:
        if not self._loaded:
            raise ConfigurationError(
                code="ENVIRONMENT_NOT_LOADED",
                message=f"load_environment() must complete before {operation}()",
                details={"operation": operation},
            )

    def compute_paths(self) -> AppPaths:
        self._require_loaded("compute_paths")
        return compute_paths(self.context, self.settings)

    def client_environment(self, public_url: Optional[str] = None) -> ClientEnvironment:
        """Snapshot of client-visible variables for ``public_url`` (default "")."""
        self._require_loaded("client_environment")
        return get_client_environment(
            public_url if public_url is not None else "",
            context=self.context,
            settings=self.settings,
        )


def load_environment(
    context: Optional[EnvironmentContext] = None,
    settings: Optional[EnvSettings] = None,
    logger: Optional[Logger] = None,
) -> BuildEnvironment:
    """Create a BuildEnvironment and run the loading phase."""
    build_env = BuildEnvironment(context=context, settings=settings, logger=logger)
    build_env.load_environment()
    return build_env


__all__ = ["BuildEnvironment", "load_environment"]
