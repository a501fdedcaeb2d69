"""Environment resolution: dotenv loading, module path normalization and
client environment projection."""

from buildenv.env.loader import SourceLoader
from buildenv.env.module_path import normalize_entries, normalize_module_path
from buildenv.env.projector import STRINGIFIED_KEY, ClientEnvironment, get_client_environment
from buildenv.env.reader import DotenvReader

__all__ = [
    "SourceLoader",
    "DotenvReader",
    "normalize_entries",
    "normalize_module_path",
    "ClientEnvironment",
    "get_client_environment",
    "STRINGIFIED_KEY",
]
