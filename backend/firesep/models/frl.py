"""Fire-resistance level (FRL) value type."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class FRL(BaseModel):
    """A fire-resistance level: structural adequacy / integrity / insulation.

    Each criterion is a duration in minutes, or ``None`` when the criterion
    does not apply.  An FRL with all three criteria set to ``None`` means
    no rating is required.
    """

    model_config = ConfigDict(frozen=True)

    structural_adequacy: int | None = Field(default=None, ge=0)
    integrity: int | None = Field(default=None, ge=0)
    insulation: int | None = Field(default=None, ge=0)

    @property
    def is_none(self) -> bool:
        return (
            self.structural_adequacy is None
            and self.integrity is None
            and self.insulation is None
        )

    def __str__(self) -> str:
        from firesep.formatting import format_frl

        return format_frl(self)


NO_FRL = FRL()
