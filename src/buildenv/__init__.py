"""buildenv - build-time environment resolution for front-end bundlers.

This package provides:
- config: Environment context, settings and project paths
- env: Layered dotenv loading, module path normalization, client projection
- bootstrap: The two-phase composition root
- logger: Structured logging with text or JSON output
- exceptions: Structured exception classes
"""

__version__ = "1.0.0"

from buildenv.logger import (
    Logger,
    StructuredLogger,
    create_logger,
    get_logger,
)

from buildenv.exceptions import (
    BuildEnvError,
    ConfigurationError,
)

from buildenv.config import (
    AppPaths,
    EnvironmentContext,
    EnvSettings,
    compute_paths,
)

from buildenv.env import (
    ClientEnvironment,
    DotenvReader,
    SourceLoader,
    get_client_environment,
    normalize_module_path,
)

from buildenv.bootstrap import (
    BuildEnvironment,
    load_environment,
)

__all__ = [
    "__version__",
    # Logger
    "Logger",
    "StructuredLogger",
    "create_logger",
    "get_logger",
    # Exceptions
    "BuildEnvError",
    "ConfigurationError",
    # Config
    "AppPaths",
    "EnvironmentContext",
    "EnvSettings",
    "compute_paths",
    # Resolution
    "ClientEnvironment",
    "DotenvReader",
    "SourceLoader",
    "get_client_environment",
    "normalize_module_path",
    # Composition root
    "BuildEnvironment",
    "load_environment",
]
