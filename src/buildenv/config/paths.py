"""Project paths derived from the resolved build environment.

Example:
    from buildenv.config import EnvSettings, compute_paths

    paths = compute_paths(context, EnvSettings())
    paths.dotenv        # /srv/app/.env
    paths.served_path   # "/" or the PUBLIC_URL / homepage path, with trailing slash

Must run after the environment has been loaded, since PUBLIC_URL may come
from a dotenv file.
"""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Optional
from urllib.parse import urlparse

from buildenv.config.context import EnvironmentContext
from buildenv.config.settings import EnvSettings
from buildenv.exceptions import ConfigurationError


def ensure_slash(input_path: str, needs_slash: bool) -> str:
    """Add or strip exactly one trailing slash."""
    has_slash = input_path.endswith("/")
    if has_slash and not needs_slash:
        return input_path[:-1]
    if not has_slash and needs_slash:
        return f"{input_path}/"
    return input_path


def read_homepage(package_json: Path) -> Optional[str]:
    """Return the ``homepage`` field of a package manifest, if any.

    A missing or unreadable manifest has no homepage.

    Raises:
        ConfigurationError: If the manifest is not valid UTF-8 JSON
    """
    if not package_json.is_file():
        return None
    try:
        content = package_json.read_bytes()
    except OSError:
        return None
    try:
        data = json.loads(content.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ConfigurationError(
            code="INVALID_PACKAGE_JSON",
            message=f"Invalid JSON in {package_json}: {e}",
            details={"path": str(package_json)},
        ) from e
    if not isinstance(data, dict):
        return None
    homepage = data.get("homepage")
    return homepage if isinstance(homepage, str) and homepage else None


@dataclass(frozen=True)
class AppPaths:
    """Resolved project locations

    Attributes:
        app_directory: Canonical project root
        dotenv: Base dotenv path
        app_package_json: Package manifest
        app_public: Static public assets directory
        app_src: Application sources
        app_node_modules: Installed modules directory
        public_url: PUBLIC_URL from the environment, else the manifest homepage
        served_path: URL path the app is served from, always ending in "/"
    """

    app_directory: Path
    dotenv: Path
    app_package_json: Path
    app_public: Path
    app_src: Path
    app_node_modules: Path
    public_url: Optional[str]
    served_path: str


def compute_paths(context: EnvironmentContext, settings: Optional[EnvSettings] = None) -> AppPaths:
    """Compute project paths from a loaded environment context."""
    settings = settings or EnvSettings()
    app_directory = settings.resolve_app_directory()
    package_json = app_directory / "package.json"

    env_public_url = context.get(settings.public_url_var) or None
    public_url = env_public_url or read_homepage(package_json)

    if env_public_url:
        served_url = env_public_url
    elif public_url:
        served_url = urlparse(public_url).path or "/"
    else:
        served_url = "/"

    return AppPaths(
        app_directory=app_directory,
        dotenv=app_directory / settings.dotenv_name,
        app_package_json=package_json,
        app_public=app_directory / "public",
        app_src=app_directory / "src",
        app_node_modules=app_directory / "node_modules",
        public_url=public_url,
        served_path=ensure_slash(served_url, True),
    )


__all__ = ["AppPaths", "compute_paths", "ensure_slash", "read_homepage"]
