"""Dataclass-based settings for buildenv

Names the variables and files the resolver works with. Every field has the
conventional front-end default and can be overridden through
{prefix}_* environment variables.
"""

import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Pattern, Tuple

from buildenv.exceptions import ConfigurationError


@dataclass(frozen=True)
class EnvSettings:
    """Build environment resolution settings

    Attributes:
        dotenv_name: Base dotenv file name inside the app directory
        app_directory: Project root (default: current working directory)
        mode_var: Variable holding the mode label (required at load time)
        default_mode: Mode reported to the client when mode_var is unset
        module_path_var: Delimiter-joined module search path variable
        namespace_prefix: Prefix selecting client-visible variables (case-insensitive)
        public_url_var: Variable holding the public asset root
        no_local_modes: Modes for which the shared .local file is skipped
    """

    dotenv_name: str = ".env"
    app_directory: Optional[Path] = None
    mode_var: str = "NODE_ENV"
    default_mode: str = "development"
    module_path_var: str = "NODE_PATH"
    namespace_prefix: str = "REACT_APP_"
    public_url_var: str = "PUBLIC_URL"
    no_local_modes: Tuple[str, ...] = ("test",)

    def __post_init__(self):
        for attr in ("dotenv_name", "mode_var", "module_path_var", "namespace_prefix"):
            if not getattr(self, attr):
                raise ConfigurationError(
                    code="INVALID_SETTING",
                    message=f"Setting '{attr}' must be a non-empty string",
                    details={"setting": attr},
                )
        if isinstance(self.app_directory, str):
            object.__setattr__(self, "app_directory", Path(self.app_directory))

    @classmethod
    def from_env(cls, prefix: str = "BUILDENV") -> "EnvSettings":
        """Load settings from environment variables

        Args:
            prefix: Environment variable prefix

        Environment variables:
            {prefix}_DOTENV_NAME: Base dotenv file name
            {prefix}_APP_DIR: Project root directory
            {prefix}_MODE_VAR: Mode variable name
            {prefix}_DEFAULT_MODE: Fallback mode reported to the client
            {prefix}_MODULE_PATH_VAR: Module search path variable name
            {prefix}_NAMESPACE_PREFIX: Client variable prefix
            {prefix}_PUBLIC_URL_VAR: Public URL variable name
        """
        app_dir = os.environ.get(f"{prefix}_APP_DIR")
        return cls(
            dotenv_name=os.environ.get(f"{prefix}_DOTENV_NAME", ".env"),
            app_directory=Path(app_dir) if app_dir else None,
            mode_var=os.environ.get(f"{prefix}_MODE_VAR", "NODE_ENV"),
            default_mode=os.environ.get(f"{prefix}_DEFAULT_MODE", "development"),
            module_path_var=os.environ.get(f"{prefix}_MODULE_PATH_VAR", "NODE_PATH"),
            namespace_prefix=os.environ.get(f"{prefix}_NAMESPACE_PREFIX", "REACT_APP_"),
            public_url_var=os.environ.get(f"{prefix}_PUBLIC_URL_VAR", "PUBLIC_URL"),
        )

    def resolve_app_directory(self) -> Path:
        """Canonical (symlink-free) absolute app directory"""
        return Path(os.path.realpath(self.app_directory or os.getcwd()))

    @property
    def dotenv_path(self) -> Path:
        """Base path every candidate dotenv file name is derived from"""
        return self.resolve_app_directory() / self.dotenv_name

    @property
    def namespace_pattern(self) -> Pattern[str]:
        return re.compile("^" + re.escape(self.namespace_prefix), re.IGNORECASE)
