"""Compliance engine for fire separation of external walls.

The ComplianceEngine takes a project, one of its walls and that wall's
openings and produces a WallComplianceResult:

1. **Dispatch**: Class 1a/1b buildings use the Housing Provisions Part 9.2
   rule set; every other class uses the Volume One Class 2-9 rule set.
2. **Table lookups**: The Class 2-9 rule set consults the repository for
   the construction type and the required external wall FRL.
3. **Opening assessment**: Each opening is assessed independently, in
   input order.
4. **Wall verdict**: Opening results and (Class 2-9 only) the 1/3 opening
   area cap combine into the overall verdict.

Evaluation is pure: no I/O, no caching, no state carried between calls.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from firesep.models.compliance import ProjectComplianceSummary
from firesep.rules.class1 import assess_class1_wall
from firesep.rules.class2to9 import assess_class2to9_wall

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from firesep.data.repository import NccDataRepository
    from firesep.models.compliance import WallComplianceResult
    from firesep.models.project import Opening, Project, WallAssessment

logger = logging.getLogger(__name__)

ENGINE_VERSION = "0.1.0"


class ComplianceEngine:
    """Core engine that converts a wall and its openings into a verdict.

    Args:
        repository: The NCC table repository providing construction type
            and FRL lookups.

    Example::

        from firesep.data.repository import NccDataRepository
        from firesep.data.construction_types import CONSTRUCTION_TYPE_RULES
        from firesep.data.frl_tables import FRL_EXTERNAL_WALL_TABLE

        repo = NccDataRepository(CONSTRUCTION_TYPE_RULES, FRL_EXTERNAL_WALL_TABLE)
        engine = ComplianceEngine(repo)
        result = engine.assess_wall(project, wall, openings)
    """

    def __init__(self, repository: NccDataRepository) -> None:
        self._repository = repository

    @property
    def repository(self) -> NccDataRepository:
        return self._repository

    def assess_wall(
        self,
        project: Project,
        wall: WallAssessment,
        openings: Sequence[Opening],
    ) -> WallComplianceResult:
        """Assess one external wall of a project.

        Args:
            project: The project owning the wall.  Its building class picks
                the rule set; rise in storeys and sprinklers feed Class 2-9.
            wall: The wall to assess.
            openings: The wall's openings.  Order only affects the order of
                ``opening_results``.

        Returns:
            A freshly computed WallComplianceResult.
        """
        building_class = project.building_class

        if building_class.is_class1():
            logger.debug("Assessing wall %s with Class 1 rules", wall.id)
            return assess_class1_wall(wall, list(openings))

        if building_class.is_class10():
            logger.warning(
                "Wall %s belongs to a Class %s project; construction type and "
                "FRL do not apply to Class 10 buildings",
                wall.id,
                building_class.value,
            )

        logger.debug(
            "Assessing wall %s with Class 2-9 rules (class %s, %d storeys)",
            wall.id,
            building_class.value,
            project.rise_in_storeys,
        )
        return assess_class2to9_wall(
            wall,
            list(openings),
            building_class,
            project.rise_in_storeys,
            project.has_sprinklers,
            self._repository,
        )

    def assess_project(
        self,
        project: Project,
        walls: Sequence[WallAssessment],
        openings_by_wall: Mapping[str, Sequence[Opening]],
    ) -> ProjectComplianceSummary:
        """Assess every wall of a project, in the order given.

        Walls missing from ``openings_by_wall`` are assessed with no openings.
        """
        results = [
            self.assess_wall(project, wall, openings_by_wall.get(wall.id, ()))
            for wall in walls
        ]
        return ProjectComplianceSummary(project_id=project.id, wall_results=results)
