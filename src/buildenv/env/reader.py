"""Dotenv file reader with variable expansion.

Parses KEY=VALUE files with python-dotenv and expands ``${VAR}`` and
``${VAR:-default}`` references. References resolve against the supplied
environment first and against keys defined earlier in the same file
second, so a value that is already set can never be shadowed by a file.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Mapping, Optional

from dotenv import dotenv_values
from dotenv.variables import parse_variables


class DotenvReader:
    """Read a single dotenv file into a flat string mapping."""

    def __init__(self, interpolate: bool = True, encoding: str = "utf-8") -> None:
        self.interpolate = interpolate
        self.encoding = encoding

    def read(self, path: Path | str, env: Optional[Mapping[str, str]] = None) -> Optional[Dict[str, str]]:
        """Parse ``path``.

        Returns None when the file does not exist. Any other I/O error
        (permissions, a directory in place of the file) propagates.
        """
        path = Path(path)
        if not path.exists():
            return None

        with path.open(encoding=self.encoding) as stream:
            parsed = dotenv_values(stream=stream, interpolate=False)

        values: Dict[str, str] = {}
        for key, value in parsed.items():
            if value is None:
                continue
            values[key] = self._expand(value, values, env) if self.interpolate else value
        return values

    @staticmethod
    def _expand(value: str, file_values: Mapping[str, str], env: Optional[Mapping[str, str]]) -> str:
        lookup: Dict[str, str] = dict(file_values)
        if env is not None:
            lookup.update(env.items())
        return "".join(atom.resolve(lookup) for atom in parse_variables(value))


__all__ = ["DotenvReader"]
