"""Explicit environment context.

The resolver never touches ``os.environ`` implicitly. A single
``EnvironmentContext`` is created at process start and handed to the loader,
the normalizer and the projector in turn. Wrapping ``os.environ`` itself
(``EnvironmentContext.from_os_environ()``) keeps child processes and other
tools in sync; wrapping a plain dict keeps tests hermetic.
"""

from __future__ import annotations

import os
from typing import Dict, ItemsView, Iterator, KeysView, MutableMapping, Optional

from buildenv.exceptions import ConfigurationError


class EnvironmentContext:
    """Mutable string-to-string mapping shared by the resolution phases."""

    def __init__(self, values: Optional[MutableMapping[str, str]] = None) -> None:
        self._values: MutableMapping[str, str] = values if values is not None else {}

    @classmethod
    def from_os_environ(cls) -> "EnvironmentContext":
        """Wrap the live process environment by reference."""
        return cls(os.environ)

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self._values.get(key, default)

    def require(self, key: str) -> str:
        """Return a non-empty value for ``key``.

        Raises:
            ConfigurationError: If the variable is unset or empty
        """
        value = self._values.get(key)
        if not value:
            raise ConfigurationError(
                code="MISSING_ENV_VAR",
                message=f"The {key} environment variable is required but was not specified.",
                details={"variable": key},
            )
        return value

    def set_default(self, key: str, value: str) -> bool:
        """Set ``key`` only when it is absent. Returns True if written."""
        if key in self._values:
            return False
        self._values[key] = value
        return True

    def set(self, key: str, value: str) -> None:
        self._values[key] = value

    def keys(self) -> KeysView[str]:
        return self._values.keys()

    def items(self) -> ItemsView[str, str]:
        return self._values.items()

    def to_dict(self) -> Dict[str, str]:
        return dict(self._values)

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __getitem__(self, key: str) -> str:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"EnvironmentContext(keys={len(self._values)})"


__all__ = ["EnvironmentContext"]
