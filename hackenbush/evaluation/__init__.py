"""Evaluation helpers for Hackenbush strategies."""

from .match import EvaluationResult, Policy, RandomPolicy, StrategyPolicy, evaluate_policies

__all__ = ["EvaluationResult", "Policy", "RandomPolicy", "StrategyPolicy", "evaluate_policies"]
