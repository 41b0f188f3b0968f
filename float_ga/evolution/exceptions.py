"""
Evolution Exception Classes

This module defines the exceptions raised when an optimization task is
misconfigured. The evolutionary core itself never raises: out-of-bounds and
non-finite descendants are filtered out as a selection outcome.
"""

import math
from typing import Optional

import numpy as np

# Largest finite float32; phenotypes are float32, so bounds must fit in it.
FLOAT32_MAX = float(np.finfo(np.float32).max)


class EvolutionError(Exception):
    """Base exception class for all evolution-related errors."""

    def __init__(self, message: str, suggestion: Optional[str] = None):
        self.message = message
        self.suggestion = suggestion
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.suggestion:
            return f"{self.message}. Suggestion: {self.suggestion}"
        return self.message


# =============================================================================
# Invalid Configuration Errors
# =============================================================================

class InvalidBoundsError(EvolutionError):
    """
    Raised when the search interval is empty or not finite.

    The lower bound must not exceed the upper bound, and both must be finite
    as float32 values.
    """

    def __init__(self, min_bound: float, max_bound: float):
        self.min_bound = min_bound
        self.max_bound = max_bound
        message = f"Invalid search bounds: [{min_bound}, {max_bound}]"
        suggestion = f"Use bounds within +/-{FLOAT32_MAX:g} with min_bound <= max_bound"
        super().__init__(message, suggestion)


class InvalidPopulationSizeError(EvolutionError):
    """Raised when population_size is not a positive integer."""

    MIN_SIZE = 1

    def __init__(self, population_size: int):
        self.population_size = population_size
        message = f"Invalid population size: {population_size}"
        suggestion = f"Population size must be at least {self.MIN_SIZE}"
        super().__init__(message, suggestion)


class InvalidGenerationCountError(EvolutionError):
    """
    Raised when the generation count is negative.

    Zero generations is allowed and returns the best initial individual.
    """

    MIN_GENERATIONS = 0

    def __init__(self, generation_count: int):
        self.generation_count = generation_count
        message = f"Invalid generation count: {generation_count}"
        suggestion = f"Generation count must be at least {self.MIN_GENERATIONS}"
        super().__init__(message, suggestion)


class InvalidMutationRateError(EvolutionError):
    """Raised when mutation_probability is outside [0, 1]."""

    MIN_RATE = 0.0
    MAX_RATE = 1.0

    def __init__(self, mutation_rate: float):
        self.mutation_rate = mutation_rate
        message = f"Invalid mutation probability: {mutation_rate}"
        suggestion = f"Mutation probability must be between {self.MIN_RATE} and {self.MAX_RATE}"
        super().__init__(message, suggestion)


# =============================================================================
# Utility Functions
# =============================================================================

def _fits_float32(value: float) -> bool:
    return math.isfinite(value) and abs(value) <= FLOAT32_MAX


def validate_bounds(min_bound: float, max_bound: float) -> None:
    """Validate that the search interval is float32-finite and non-empty."""
    if not (_fits_float32(min_bound) and _fits_float32(max_bound)) or min_bound > max_bound:
        raise InvalidBoundsError(min_bound, max_bound)


def validate_population_size(size: int) -> None:
    """Validate population size is a positive integer."""
    if isinstance(size, bool) or not isinstance(size, int) or size < InvalidPopulationSizeError.MIN_SIZE:
        raise InvalidPopulationSizeError(size)


def validate_generation_count(count: int) -> None:
    """Validate generation count is a non-negative integer."""
    if isinstance(count, bool) or not isinstance(count, int) or count < InvalidGenerationCountError.MIN_GENERATIONS:
        raise InvalidGenerationCountError(count)


def validate_mutation_rate(rate: float) -> None:
    """Validate mutation probability is within [0, 1]."""
    if not InvalidMutationRateError.MIN_RATE <= rate <= InvalidMutationRateError.MAX_RATE:
        raise InvalidMutationRateError(rate)
