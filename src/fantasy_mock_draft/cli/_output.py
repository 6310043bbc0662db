from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table

if TYPE_CHECKING:
    from fantasy_mock_draft.domain.settings import Strategy
    from fantasy_mock_draft.draft.strategy_presets import StrategyProfile

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)


def print_error(message: str) -> None:
    err_console.print(f"[red bold]Error:[/red bold] {message}", soft_wrap=True)


def print_strategies(presets: dict[Strategy, StrategyProfile]) -> None:
    table = Table(title="Draft Strategies")
    table.add_column("Strategy")
    table.add_column("Description")
    table.add_column("Early lean")
    for strategy, profile in presets.items():
        first = profile.bands[0] if profile.bands else None
        lean = ", ".join(f"{pos.value} {weight:+.2f}" for pos, weight in first.weights.items()) if first else ""
        if profile.elite_qb_bonus:
            lean = ", ".join(filter(None, (lean, f"elite QB {profile.elite_qb_bonus:+.1f}")))
        if profile.upside_weight:
            lean = ", ".join(filter(None, (lean, f"upside x{profile.upside_weight:.1f}")))
        table.add_row(strategy.value, profile.description, lean or "-")
    console.print(table)
