"""Scout TUI - interactive chat interface for Project Scout."""

from __future__ import annotations

from typing import Any

__all__ = ["ScoutTUI", "main"]


def __getattr__(name: str) -> Any:
    """Lazy import ScoutTUI to avoid importing textual at module load."""
    if name == "ScoutTUI":
        from scout.tui.app import ScoutTUI

        return ScoutTUI
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


def main() -> None:
    """Entry point for the scout-chat command."""
    from scout.tui.app import main as _main

    _main()
