"""Client environment projection.

Builds the variables a bundler injects into client code: the mode and the
public URL, plus every variable whose name starts with the client namespace
prefix (REACT_APP_ by default, case-insensitive). ``stringified`` holds the
same keys with JSON-encoded values grouped under ``"process.env"``, ready
for literal substitution.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Dict, Optional

from buildenv.config.context import EnvironmentContext
from buildenv.config.settings import EnvSettings

STRINGIFIED_KEY = "process.env"
MODE_KEY = "NODE_ENV"
PUBLIC_URL_KEY = "PUBLIC_URL"


@dataclass(frozen=True)
class ClientEnvironment:
    """Snapshot of client-visible variables

    Attributes:
        raw: Variable name to plain value
        stringified: {"process.env": {name: JSON-encoded value}}
    """

    raw: Dict[str, str]
    stringified: Dict[str, Dict[str, str]]

    def to_dict(self) -> Dict[str, Any]:
        return {"raw": dict(self.raw), "stringified": {k: dict(v) for k, v in self.stringified.items()}}


def get_client_environment(
    public_url: str,
    context: Optional[EnvironmentContext] = None,
    settings: Optional[EnvSettings] = None,
) -> ClientEnvironment:
    """Project ``context`` into a client environment snapshot.

    The mode and public URL entries are seeded first; namespace-matching
    variables are folded over them, so a matching variable with the same
    name replaces the seeded value. The context is not modified.
    """
    context = context if context is not None else EnvironmentContext.from_os_environ()
    settings = settings or EnvSettings()
    pattern = settings.namespace_pattern

    raw: Dict[str, str] = {
        MODE_KEY: context.get(settings.mode_var) or settings.default_mode,
        PUBLIC_URL_KEY: public_url,
    }
    for key, value in context.items():
        if pattern.match(key):
            raw[key] = value

    stringified = {
        STRINGIFIED_KEY: {key: json.dumps(value, ensure_ascii=False) for key, value in raw.items()},
    }
    return ClientEnvironment(raw=raw, stringified=stringified)


__all__ = ["ClientEnvironment", "get_client_environment", "STRINGIFIED_KEY"]
