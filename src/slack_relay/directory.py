"""Role label -> Slack mention token directory.

The relay only reads the directory; it is loaded from settings at startup and
may be replaced out of band (PUT /directory). Each snapshot is an immutable
mapping and replacement is a single reference swap, so concurrent readers see
either the old or the new mapping in full.
"""

import logging
from collections.abc import Mapping
from types import MappingProxyType

logger = logging.getLogger(__name__)


class Directory:
    """Holder for the current directory snapshot."""

    def __init__(self, entries: Mapping[str, str] | None = None) -> None:
        self._snapshot: Mapping[str, str] = MappingProxyType(dict(entries or {}))

    def current(self) -> Mapping[str, str]:
        """Return the current read-only snapshot."""
        return self._snapshot

    def replace(self, entries: Mapping[str, str]) -> None:
        """Install a new snapshot. Insertion order of ``entries`` is preserved."""
        self._snapshot = MappingProxyType(dict(entries))
        logger.info("Directory replaced with %d entries", len(entries))

    def __len__(self) -> int:
        return len(self._snapshot)
