"""Sensitivity of the chosen decision to the belief in a two-hypothesis problem."""

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple, Union

import numpy as np

from ..core.errors import DimensionMismatch, EmptyDecisionSet
from ..core.models import DEFAULT_TOLERANCE, TieBreak
from .expected_loss import LossVector, _loss_vector, select_minimum_expected_loss


@dataclass
class SweepPoint:
    """Selection at one value of p = P(hypothesis 0)"""

    probability: float
    chosen_indices: List[int]
    expected_losses: List[float]


def _require_two_hypotheses(decisions: Sequence[LossVector]) -> None:
    if len(decisions) == 0:
        raise EmptyDecisionSet("At least one decision is required")
    for k, decision in enumerate(decisions):
        if len(_loss_vector(decision)) != 2:
            raise DimensionMismatch(
                f"Decision {k} has {len(_loss_vector(decision))} losses; "
                "a sweep needs exactly 2 hypotheses"
            )


def sweep_two_hypotheses(
    decisions: Sequence[LossVector],
    num_points: int = 101,
    tie_break: Union[str, TieBreak] = TieBreak.FIRST,
    tolerance: float = DEFAULT_TOLERANCE,
) -> List[SweepPoint]:
    """Run the selector for p evenly spaced over [0, 1]."""
    if num_points < 2:
        raise ValueError(f"num_points must be at least 2, got {num_points}")
    _require_two_hypotheses(decisions)

    points: List[SweepPoint] = []
    for p in np.linspace(0.0, 1.0, num_points):
        p = float(p)
        result = select_minimum_expected_loss(
            decisions, [p, 1.0 - p], tie_break=tie_break, tolerance=tolerance
        )
        points.append(
            SweepPoint(
                probability=p,
                chosen_indices=list(result.chosen_indices),
                expected_losses=list(result.expected_losses),
            )
        )
    return points


def summarize_runs(points: Sequence[SweepPoint]) -> List[Tuple[float, float, List[int]]]:
    """Collapse consecutive sweep points with the same choice into (start, end, indices)."""
    runs: List[Tuple[float, float, List[int]]] = []
    for point in points:
        if runs and runs[-1][2] == point.chosen_indices:
            start, _, indices = runs[-1]
            runs[-1] = (start, point.probability, indices)
        else:
            runs.append((point.probability, point.probability, point.chosen_indices))
    return runs


def break_even_probability(
    losses_a: Sequence[float], losses_b: Sequence[float]
) -> Optional[float]:
    """
    Value of p = P(hypothesis 0) at which two decisions have equal expected loss.

    Returns None when the expected-loss lines are parallel or cross outside [0, 1].
    Identical loss vectors also give None even though they tie at every p;
    compare the vectors to tell that case apart.
    """
    a = np.asarray(losses_a, dtype=float)
    b = np.asarray(losses_b, dtype=float)
    if a.shape != (2,) or b.shape != (2,):
        raise DimensionMismatch("break-even needs two loss vectors of length 2")

    # E_a(p) - E_b(p) = offset + slope * p
    offset = a[1] - b[1]
    slope = (a[0] - b[0]) - offset
    if slope == 0:
        return None
    p = offset / -slope
    if p < 0.0 or p > 1.0:
        return None
    # offset == 0 gives -0.0
    return float(p) + 0.0
