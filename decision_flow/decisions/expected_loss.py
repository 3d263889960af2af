"""
Minimum expected loss selection over a finite set of hypotheses.

For a belief vector p over n hypotheses and a decision d with losses
w_1(d)..w_n(d), the expected loss is

    E[L(d)] = sum_i p_i * w_i(d)

and the chosen decision is the one minimizing it. The two-decision case is
the classic "robot choice": with p = [0.35, 0.65], decision A = [0, 1000]
and decision B = [50, 0] give E[A] = 650 and E[B] = 17.5, so B is chosen.

Sums are accumulated left to right in input order with plain float
arithmetic, so identical inputs always produce bit-identical results.
Everything here is pure: no logging, no printing, no shared state.
"""

import math
from typing import TYPE_CHECKING, List, Sequence, Tuple, Union

from ..core.errors import (
    AmbiguousSelection,
    DimensionMismatch,
    EmptyDecisionSet,
    InvalidDistribution,
    InvalidLossValue,
)
from ..core.models import DEFAULT_TOLERANCE, Decision, LossTableEntry, SelectionResult, TieBreak

if TYPE_CHECKING:
    from ..config.problem_config import SelectorConfig

LossVector = Union[Sequence[float], Decision]


def _check_tolerance(tolerance: float) -> float:
    tolerance = float(tolerance)
    if not math.isfinite(tolerance) or tolerance < 0:
        raise ValueError(f"tolerance must be a finite non-negative number, got {tolerance}")
    return tolerance


def _coerce_tie_break(tie_break: Union[str, TieBreak]) -> TieBreak:
    try:
        return TieBreak(tie_break)
    except ValueError:
        allowed = ", ".join(t.value for t in TieBreak)
        raise ValueError(f"Unknown tie_break {tie_break!r}; expected one of: {allowed}") from None


def validate_distribution(
    probabilities: Sequence[float], tolerance: float = DEFAULT_TOLERANCE
) -> List[float]:
    """Return the probabilities as floats, or raise InvalidDistribution."""
    tolerance = _check_tolerance(tolerance)
    values = [float(p) for p in probabilities]
    if not values:
        raise InvalidDistribution("Probability vector is empty")

    for i, p in enumerate(values):
        if not math.isfinite(p) or p < 0.0 or p > 1.0:
            raise InvalidDistribution(f"Probability {i} is {p}, outside [0, 1]")

    total = 0.0
    for p in values:
        total += p
    if abs(total - 1.0) > tolerance:
        raise InvalidDistribution(
            f"Probabilities sum to {total!r}, not 1 within tolerance {tolerance:g}"
        )
    return values


def _loss_vector(decision: LossVector) -> Sequence[float]:
    if isinstance(decision, Decision):
        return decision.losses
    return decision


def compute_expected_losses(
    decisions: Sequence[LossVector],
    probabilities: Sequence[float],
    tolerance: float = DEFAULT_TOLERANCE,
) -> List[Tuple[int, float]]:
    """
    Compute the expected loss of every decision.

    Args:
        decisions: Loss vectors (or Decision models), one per decision.
        probabilities: Belief over the n hypotheses.
        tolerance: Allowed deviation of sum(probabilities) from 1.

    Returns:
        (index, expected_loss) pairs in input order.

    Raises:
        EmptyDecisionSet: no decisions.
        InvalidDistribution: probabilities fail the range or sum check.
        DimensionMismatch: a loss vector's length differs from n.
        InvalidLossValue: a loss is NaN or infinite.
    """
    if len(decisions) == 0:
        raise EmptyDecisionSet("At least one decision is required")

    probs = validate_distribution(probabilities, tolerance)
    n = len(probs)

    loss_vectors: List[List[float]] = []
    for k, decision in enumerate(decisions):
        losses = [float(w) for w in _loss_vector(decision)]
        if len(losses) != n:
            raise DimensionMismatch(
                f"Decision {k} has {len(losses)} losses but there are {n} hypotheses"
            )
        for i, w in enumerate(losses):
            if not math.isfinite(w):
                raise InvalidLossValue(f"Decision {k} has non-finite loss {w} at hypothesis {i}")
        loss_vectors.append(losses)

    results: List[Tuple[int, float]] = []
    for k, losses in enumerate(loss_vectors):
        expected = 0.0
        for p, w in zip(probs, losses):
            expected += p * w
        results.append((k, expected))
    return results


def select_minimum_expected_loss(
    decisions: Sequence[LossVector],
    probabilities: Sequence[float],
    tie_break: Union[str, TieBreak] = TieBreak.FIRST,
    tolerance: float = DEFAULT_TOLERANCE,
) -> SelectionResult:
    """
    Select the decision(s) with minimum expected loss.

    Decisions whose expected loss is within `tolerance` of the minimum tie.
    "first" keeps the lowest tying index, "all" keeps every tying index and
    "error" raises AmbiguousSelection when more than one decision ties.
    Errors from compute_expected_losses propagate unchanged.
    """
    policy = _coerce_tie_break(tie_break)
    table = compute_expected_losses(decisions, probabilities, tolerance)

    minimum = min(expected for _, expected in table)
    tied = [(k, expected) for k, expected in table if expected - minimum <= tolerance]

    if policy is TieBreak.ERROR and len(tied) > 1:
        raise AmbiguousSelection([k for k, _ in tied], minimum)
    chosen = tied if policy is TieBreak.ALL else tied[:1]

    return SelectionResult(
        chosen_indices=[k for k, _ in chosen],
        expected_losses=[expected for _, expected in chosen],
        loss_table=[LossTableEntry(index=k, expected_loss=e) for k, e in table],
        tie_break=policy,
        tied_indices=[k for k, _ in tied],
    )


class ExpectedLossSelector:
    """Holds a tolerance and tie-break policy; keeps nothing between calls"""

    def __init__(
        self,
        tolerance: float = DEFAULT_TOLERANCE,
        tie_break: Union[str, TieBreak] = TieBreak.FIRST,
    ):
        self.tolerance = _check_tolerance(tolerance)
        self.tie_break = _coerce_tie_break(tie_break)

    @classmethod
    def from_config(cls, config: "SelectorConfig") -> "ExpectedLossSelector":
        return cls(tolerance=config.tolerance, tie_break=config.tie_break)

    def compute(
        self, decisions: Sequence[LossVector], probabilities: Sequence[float]
    ) -> List[Tuple[int, float]]:
        return compute_expected_losses(decisions, probabilities, self.tolerance)

    def select(
        self, decisions: Sequence[LossVector], probabilities: Sequence[float]
    ) -> SelectionResult:
        return select_minimum_expected_loss(
            decisions, probabilities, self.tie_break, self.tolerance
        )

    def __repr__(self) -> str:
        return f"ExpectedLossSelector(tolerance={self.tolerance!r}, tie_break={self.tie_break.value!r})"
