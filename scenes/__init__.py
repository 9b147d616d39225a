"""scenes — Playable scenes and their draw helpers."""
