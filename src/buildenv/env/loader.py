"""Layered dotenv loading.

Candidate files, highest precedence first:
1) <base>.<mode>.local
2) <base>.<mode>
3) <base>.local   (skipped for the "test" mode so results do not depend on the machine)
4) <base>

Files are applied in that order and a key is only ever written when it is
still absent, so the process environment beats every file and earlier files
beat later ones.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from buildenv.config.context import EnvironmentContext
from buildenv.config.settings import EnvSettings
from buildenv.env.reader import DotenvReader
from buildenv.exceptions import ConfigurationError
from buildenv.logger import Logger, get_logger


class SourceLoader:
    """Merge layered dotenv files into an environment context."""

    def __init__(
        self,
        settings: Optional[EnvSettings] = None,
        reader: Optional[DotenvReader] = None,
        logger: Optional[Logger] = None,
    ) -> None:
        self.settings = settings or EnvSettings()
        self.reader = reader or DotenvReader()
        self.logger = logger or get_logger()

    def candidate_sources(self, mode: str, base: Optional[Path] = None) -> List[Path]:
        """Candidate dotenv paths for ``mode``, highest precedence first."""
        base_name = str(base or self.settings.dotenv_path)
        candidates = [f"{base_name}.{mode}.local", f"{base_name}.{mode}"]
        if mode not in self.settings.no_local_modes:
            candidates.append(f"{base_name}.local")
        candidates.append(base_name)
        return [Path(candidate) for candidate in candidates]

    def load(self, context: EnvironmentContext) -> None:
        """Apply every existing candidate file to ``context``.

        Raises:
            ConfigurationError: If the mode variable is unset or empty
        """
        try:
            mode = context.require(self.settings.mode_var)
        except ConfigurationError as e:
            raise ConfigurationError(code="MODE_NOT_SET", message=e.message, details=e.details) from e

        for path in self.candidate_sources(mode):
            values = self.reader.read(path, env=context.to_dict())
            if values is None:
                self.logger.debug("Dotenv file not found, skipping", path=str(path))
                continue

            written = 0
            for key, value in values.items():
                if context.set_default(key, value):
                    written += 1
            self.logger.info("Applied dotenv file", path=str(path), keys=len(values), written=written)


__all__ = ["SourceLoader"]
