"""
Float GA

Genetic-algorithm search for the input that maximizes a one-argument real
function over a bounded interval.
"""

from .evolution import OptimizationTask, optimize

__all__ = ["OptimizationTask", "optimize"]
