from enum import Enum
from typing import List

from pydantic import BaseModel, Field, field_validator, model_validator

DEFAULT_TOLERANCE: float = 1e-6


class TieBreak(str, Enum):
    """How to resolve several decisions sharing the minimum expected loss"""

    FIRST = "first"
    ALL = "all"
    ERROR = "error"


class Decision(BaseModel):
    """A named action with one loss value per hypothesis"""

    name: str = Field(..., min_length=1, description="Label used in reports")
    losses: List[float] = Field(
        ...,
        min_length=1,
        description="Loss incurred if this decision is taken and hypothesis i is true",
    )


class LossTableEntry(BaseModel):
    """Expected loss of one decision, identified by its input position"""

    model_config = {"frozen": True}

    index: int = Field(ge=0)
    expected_loss: float


class SelectionResult(BaseModel):
    """
    Outcome of a minimum expected loss selection.

    `chosen_indices` holds one index under the "first" and "error" policies
    and every tying index under "all". `loss_table` always lists every
    decision in input order so callers can audit the choice.
    """

    model_config = {"frozen": True}

    chosen_indices: List[int] = Field(..., min_length=1)
    expected_losses: List[float] = Field(..., min_length=1)
    loss_table: List[LossTableEntry] = Field(..., min_length=1)
    tie_break: TieBreak = TieBreak.FIRST
    tied_indices: List[int] = Field(
        default_factory=list,
        description="Every index within tolerance of the minimum, whatever the policy",
    )

    @field_validator("chosen_indices")
    @classmethod
    def _ascending(cls, value: List[int]) -> List[int]:
        if value != sorted(set(value)):
            raise ValueError("chosen_indices must be unique and ascending")
        return value

    @model_validator(mode="after")
    def _aligned(self) -> "SelectionResult":
        if len(self.chosen_indices) != len(self.expected_losses):
            raise ValueError("expected_losses must align with chosen_indices")
        return self

    @property
    def chosen_index(self) -> int:
        return self.chosen_indices[0]

    @property
    def expected_loss(self) -> float:
        return self.expected_losses[0]

    @property
    def is_tie(self) -> bool:
        return len(self.tied_indices) > 1
