"""components.event_log — Gameplay event log.

A ring buffer that records what happened and when (in frames): blocks
mined and placed, recipes crafted, meals eaten, starvation.  The HUD
shows the newest entry; tests read it to confirm an action landed.

Usage:
    log = game.log
    log.record(game.frame_count, "mine", "Mined Tree", details={"x": 3, "y": 4})

Each entry is a dict:
    {"frame": int, "cat": str, "msg": str, "details": dict | None}
"""

from __future__ import annotations
from dataclasses import dataclass, field


@dataclass
class EventLog:
    """Ring-buffer of gameplay events."""

    entries: list[dict] = field(default_factory=list)
    max_entries: int = 200
    _paused: bool = False

    # If non-empty, only entries whose ``cat`` is in the set are kept.
    cat_filter: set[str] = field(default_factory=set)

    def record(self, frame: int, cat: str, msg: str, *,
               details: dict | None = None) -> None:
        if self._paused:
            return
        if self.cat_filter and cat not in self.cat_filter:
            return
        self.entries.append({
            "frame": frame,
            "cat": cat,
            "msg": msg,
            "details": details,
        })
        if len(self.entries) > self.max_entries:
            self.entries = self.entries[-self.max_entries:]

    def clear(self):
        self.entries.clear()

    def pause(self):
        self._paused = True

    def resume(self):
        self._paused = False

    def latest(self) -> dict | None:
        return self.entries[-1] if self.entries else None

    def recent(self, n: int = 10) -> list[dict]:
        """Return the *n* most recent entries (newest last)."""
        return self.entries[-n:]

    def for_cat(self, cat: str, n: int = 50) -> list[dict]:
        """Return last *n* entries in a category."""
        return [e for e in self.entries if e["cat"] == cat][-n:]
