"""Minimum expected loss decisions over a finite set of hypotheses."""

from .core import (
    AmbiguousSelection,
    DecisionError,
    DimensionMismatch,
    EmptyDecisionSet,
    InvalidDistribution,
    InvalidLikelihood,
    InvalidLossValue,
    Decision,
    SelectionResult,
    TieBreak,
)
from .decisions import ExpectedLossSelector, compute_expected_losses, select_minimum_expected_loss
from .beliefs import posterior, sequential_posterior
from .config import DecisionProblem, SelectorConfig

__all__ = [
    'AmbiguousSelection',
    'DecisionError',
    'DimensionMismatch',
    'EmptyDecisionSet',
    'InvalidDistribution',
    'InvalidLikelihood',
    'InvalidLossValue',
    'Decision',
    'SelectionResult',
    'TieBreak',
    'ExpectedLossSelector',
    'compute_expected_losses',
    'select_minimum_expected_loss',
    'posterior',
    'sequential_posterior',
    'DecisionProblem',
    'SelectorConfig',
]
