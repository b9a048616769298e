"""Simulation evaluator and severity classifier."""

from pollumap.simulation.classifier import classify, classify_reading
from pollumap.simulation.evaluator import composite_toxicity, simulate

__all__ = ["classify", "classify_reading", "composite_toxicity", "simulate"]
