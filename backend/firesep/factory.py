"""Factory functions for creating pre-configured ComplianceEngine instances."""

from __future__ import annotations

from firesep.data.construction_types import CONSTRUCTION_TYPE_RULES
from firesep.data.frl_tables import FRL_EXTERNAL_WALL_TABLE
from firesep.data.repository import NccDataRepository
from firesep.engine import ComplianceEngine


def create_default_engine() -> ComplianceEngine:
    """Create a ComplianceEngine wired up with the built-in NCC tables.

    This is the recommended way to create a ComplianceEngine.  It wires up
    an NccDataRepository with the bundled construction type rules and
    Specification 5 FRL table so callers don't need to understand the
    internal wiring.

    Example::

        from firesep import create_default_engine

        engine = create_default_engine()
        result = engine.assess_wall(project, wall, openings)
    """
    repository = NccDataRepository(CONSTRUCTION_TYPE_RULES, FRL_EXTERNAL_WALL_TABLE)
    return ComplianceEngine(repository)
