"""core/tuning.py — Data-driven tuning constants.

Gameplay numbers can be overridden in ``data/tuning.toml``, loaded once
at startup.  Any system can read a value with::

    from core.tuning import get
    interval = get("hunger", "tick_frames", HUNGER_TICK)

Every caller passes the compiled-in default, so a missing file (or a
missing key) leaves the game exactly as shipped.

Hot-reload: call ``reload()`` to re-read the file.  In-game, press F5.
"""

from __future__ import annotations
from pathlib import Path

try:
    import tomllib                         # Python 3.11+
except ModuleNotFoundError:
    import tomli as tomllib                # pip install tomli


_data: dict = {}
_path: Path | None = None


def load(path: str | Path | None = None) -> None:
    """Load (or reload) tuning constants from *path*.

    If *path* is ``None``, default to ``data/tuning.toml`` relative to
    the project root (one level above ``core/``).
    """
    global _data, _path

    if path is None:
        root = Path(__file__).resolve().parent.parent
        path = root / "data" / "tuning.toml"
    else:
        path = Path(path)

    _path = path

    if not path.exists():
        print(f"[TUNING] {path} not found — using defaults")
        _data = {}
        return

    with open(path, "rb") as f:
        _data = tomllib.load(f)

    count = _count_leaves(_data)
    print(f"[TUNING] Loaded {count} values from {path}")


def reload() -> None:
    """Re-read the tuning file from disk (hot-reload)."""
    load(_path)


def reset() -> None:
    """Forget all loaded values so every ``get`` returns its default."""
    global _data, _path
    _data = {}
    _path = None


def get(section_path: str, key: str, default=None):
    """Read a tuning value.

    *section_path* uses dot-notation to traverse nested tables, e.g.
    ``"food.forage"`` looks up ``[food.forage]``.

    >>> get("hunger", "no_such_key", 540)
    540
    """
    table = _table(section_path)
    if table is None:
        return default
    return table.get(key, default)


def section(section_path: str) -> dict:
    """Return an entire section dict (shallow copy), or empty dict."""
    table = _table(section_path)
    return dict(table) if table is not None else {}


def _table(section_path: str) -> dict | None:
    node = _data
    for part in section_path.split("."):
        node = node.get(part) if isinstance(node, dict) else None
        if node is None:
            return None
    return node if isinstance(node, dict) else None


def _count_leaves(d: dict) -> int:
    return sum(_count_leaves(v) if isinstance(v, dict) else 1
               for v in d.values())
