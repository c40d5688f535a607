"""Evaluation pipeline: scoring, classification, advice, explanation."""

from diagonal_advisor.engine.evaluate import evaluate

__all__ = ["evaluate"]
