"""Formatting helpers for compliance output.

Renders FRLs, distances, areas and percentages the way they appear on
assessment reports (e.g. ``'90/60/-'``, ``'900mm'``, ``'1.80m²'``).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from firesep.models.frl import FRL


def _criterion(value: int | None) -> str:
    return str(value) if value is not None else "-"


def format_frl(frl: FRL) -> str:
    """Format an FRL as 'SA/I/INS', with '-' for criteria that do not apply."""
    return (
        f"{_criterion(frl.structural_adequacy)}/"
        f"{_criterion(frl.integrity)}/"
        f"{_criterion(frl.insulation)}"
    )


def frl_is_none(frl: FRL) -> bool:
    return frl.is_none


def format_distance(metres: float) -> str:
    """Format a distance: millimetres below 1m (e.g. '900mm'), else metres."""
    if metres < 1:
        return f"{round(metres * 1000)}mm"
    return f"{metres:g}m"


def format_percentage(value: float) -> str:
    """Format a fraction as a percentage to one decimal place."""
    return f"{value * 100:.1f}%"


def format_area(m2: float) -> str:
    return f"{m2:.2f}m²"
