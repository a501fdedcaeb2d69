"""Module search path normalization.

Relative entries of the module search path (NODE_PATH by default) are
resolved against the real working directory so that every tool sees the
same absolute directories. Absolute entries are kept exactly as given and
empty entries are dropped. Running the normalization twice yields the same
value as running it once.

Unlike create-react-app's env.js, which discards absolute NODE_PATH entries,
absolute entries are preserved here so that normalization stays idempotent.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import List, Optional

from buildenv.config.context import EnvironmentContext
from buildenv.logger import Logger


def normalize_entries(value: str, anchor: str) -> List[str]:
    """Split ``value`` on the path delimiter and anchor relative entries."""
    entries = []
    for folder in value.split(os.pathsep):
        if not folder:
            continue
        if os.path.isabs(folder):
            entries.append(folder)
        else:
            entries.append(os.path.normpath(os.path.join(anchor, folder)))
    return entries


def normalize_module_path(
    context: EnvironmentContext,
    var_name: str = "NODE_PATH",
    cwd: Optional[Path | str] = None,
    logger: Optional[Logger] = None,
) -> str:
    """Rewrite ``var_name`` in ``context`` with absolute entries only.

    Args:
        context: Environment context to update
        var_name: Module search path variable
        cwd: Directory relative entries are resolved against (default: os.getcwd())
        logger: Optional logger for the rewritten value

    Returns:
        The normalized, delimiter-joined value (empty string for no entries)
    """
    anchor = os.path.realpath(cwd if cwd is not None else os.getcwd())
    entries = normalize_entries(context.get(var_name) or "", anchor)
    normalized = os.pathsep.join(entries)
    context.set(var_name, normalized)
    if logger is not None:
        logger.debug("Normalized module search path", variable=var_name, entries=len(entries))
    return normalized


__all__ = ["normalize_entries", "normalize_module_path"]
