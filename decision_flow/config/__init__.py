from .problem_config import DecisionProblem, SelectorConfig

__all__ = ['DecisionProblem', 'SelectorConfig']
