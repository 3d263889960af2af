from .errors import (
    AmbiguousSelection,
    DecisionError,
    DimensionMismatch,
    EmptyDecisionSet,
    InvalidDistribution,
    InvalidLikelihood,
    InvalidLossValue,
)
from .models import DEFAULT_TOLERANCE, Decision, LossTableEntry, SelectionResult, TieBreak

__all__ = [
    'AmbiguousSelection',
    'DecisionError',
    'DimensionMismatch',
    'EmptyDecisionSet',
    'InvalidDistribution',
    'InvalidLikelihood',
    'InvalidLossValue',
    'DEFAULT_TOLERANCE',
    'Decision',
    'LossTableEntry',
    'SelectionResult',
    'TieBreak',
]
