from .expected_loss import (
    ExpectedLossSelector,
    compute_expected_losses,
    select_minimum_expected_loss,
    validate_distribution,
)
from .sensitivity import SweepPoint, break_even_probability, summarize_runs, sweep_two_hypotheses

__all__ = [
    'ExpectedLossSelector',
    'compute_expected_losses',
    'select_minimum_expected_loss',
    'validate_distribution',
    'SweepPoint',
    'break_even_probability',
    'summarize_runs',
    'sweep_two_hypotheses',
]
