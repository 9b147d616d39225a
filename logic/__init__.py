"""logic — Gameplay rules.

Modules
-------
game      — session orchestrator: frame counter, crafting mode, input dispatch
player    — movement, mining, placing, eating, hunger ticks
crafting  — all-or-nothing recipe resolution
bindings  — raw key code → action table
"""
