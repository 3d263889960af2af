from typing import List, Optional
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, field_validator, model_validator

from ..beliefs.posterior import sequential_posterior
from ..core.errors import DimensionMismatch
from ..core.models import DEFAULT_TOLERANCE, Decision, SelectionResult, TieBreak
from ..decisions.expected_loss import ExpectedLossSelector


class SelectorConfig(BaseModel):
    """Tolerance and tie-break policy for the expected loss selector"""

    tolerance: float = Field(
        default=DEFAULT_TOLERANCE,
        ge=0.0,
        description="Allowed deviation of the probabilities from 1, also used for ties"
    )
    tie_break: TieBreak = Field(
        default=TieBreak.FIRST,
        description="first, all or error"
    )


class DecisionProblem(BaseModel):
    """A decision problem as written in a YAML file"""

    name: str = Field(
        default="decision problem",
        description="Title used in reports"
    )
    hypotheses: List[str] = Field(
        ...,
        min_length=1,
        description="Mutually exclusive, exhaustive states of the world"
    )
    probabilities: Optional[List[float]] = Field(
        default=None,
        description="Current belief over the hypotheses"
    )
    prior: Optional[List[float]] = Field(
        default=None,
        description="Belief before the observations in `likelihoods`"
    )
    likelihoods: List[List[float]] = Field(
        default_factory=list,
        description="One P(observation | hypothesis) vector per observation"
    )
    decisions: List[Decision] = Field(
        ...,
        min_length=1,
        description="Candidate decisions with one loss per hypothesis"
    )
    selector: SelectorConfig = Field(
        default_factory=SelectorConfig,
        description="Selector settings"
    )

    @field_validator("hypotheses")
    @classmethod
    def _unique_hypotheses(cls, value: List[str]) -> List[str]:
        if len(set(value)) != len(value):
            raise ValueError("hypothesis names must be unique")
        return value

    @model_validator(mode="after")
    def _belief_source(self) -> "DecisionProblem":
        if (self.probabilities is None) == (self.prior is None):
            raise ValueError("give exactly one of 'probabilities' or 'prior'")
        if self.probabilities is not None and self.likelihoods:
            raise ValueError("'likelihoods' requires 'prior' instead of 'probabilities'")
        return self

    @property
    def decision_names(self) -> List[str]:
        return [d.name for d in self.decisions]

    def beliefs(self, tolerance: Optional[float] = None) -> List[float]:
        """
        Probabilities to decide with, updating the prior when observations are given.

        `tolerance` overrides `selector.tolerance` for the prior check.
        """
        if tolerance is None:
            tolerance = self.selector.tolerance
        n = len(self.hypotheses)
        vector = self.probabilities if self.probabilities is not None else self.prior
        if len(vector) != n:
            raise DimensionMismatch(
                f"{len(vector)} probabilities given for {n} hypotheses"
            )
        if self.probabilities is not None:
            return list(self.probabilities)
        return sequential_posterior(self.prior, self.likelihoods, tolerance)[-1]

    def solve(self, selector: Optional[ExpectedLossSelector] = None) -> SelectionResult:
        selector = selector or ExpectedLossSelector.from_config(self.selector)
        return selector.select(self.decisions, self.beliefs(selector.tolerance))

    @classmethod
    def example(cls) -> "DecisionProblem":
        """Two hypotheses, two decisions: the robot has to pick an action"""
        return cls(
            name="robot choice",
            hypotheses=["H1", "H2"],
            probabilities=[0.35, 0.65],
            decisions=[
                Decision(name="A", losses=[0.0, 1000.0]),
                Decision(name="B", losses=[50.0, 0.0]),
            ],
        )

    @classmethod
    def from_yaml(cls, path: Path) -> "DecisionProblem":
        """Load a decision problem from a YAML file"""
        with open(path, 'r') as f:
            config_dict = yaml.safe_load(f)
        return cls.model_validate(config_dict)

    def to_yaml(self, path: Path) -> None:
        with open(path, 'w') as f:
            yaml.safe_dump(
                self.model_dump(mode="json", exclude_none=True),
                f,
                default_flow_style=False,
                sort_keys=False,
            )
