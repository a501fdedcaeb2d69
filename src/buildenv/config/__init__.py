"""Configuration module for buildenv

Example:
    from buildenv.config import EnvironmentContext, EnvSettings, compute_paths

    settings = EnvSettings.from_env()
    context = EnvironmentContext.from_os_environ()
    paths = compute_paths(context, settings)
"""

from buildenv.config.context import EnvironmentContext
from buildenv.config.paths import AppPaths, compute_paths, ensure_slash, read_homepage
from buildenv.config.settings import EnvSettings

__all__ = [
    "EnvironmentContext",
    "EnvSettings",
    "AppPaths",
    "compute_paths",
    "ensure_slash",
    "read_homepage",
]
