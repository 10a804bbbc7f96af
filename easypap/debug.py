"""Debug flag selection."""

from __future__ import annotations


class DebugFlags:
    """A set of single-character debug flags; ``+`` enables every flag."""

    def __init__(self, flags: str | None = None):
        self.flags = flags

    def enabled(self, flag: str) -> bool:
        if self.flags is None:
            return False
        return flag in self.flags or "+" in self.flags