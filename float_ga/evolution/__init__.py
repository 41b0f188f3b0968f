"""
演化引擎 (Evolution Engine)

以 32 位元基因型編碼 float32 表現型的遺傳演算法。
"""

from .models import (
    FitnessFunction,
    Individual,
    bits_to_float,
    float_to_bits,
    format_float32,
)

from .crossover import (
    byte_slice_crossover,
)

from .mutation import (
    flip_random_bit,
    maybe_mutate,
)

from .population import (
    Population,
    PopulationParams,
)

from .generation import (
    GenerationStats,
)

from .engine import (
    OptimizationTask,
    optimize,
)

from .exceptions import (
    EvolutionError,
    InvalidBoundsError,
    InvalidPopulationSizeError,
    InvalidGenerationCountError,
    InvalidMutationRateError,
    validate_bounds,
    validate_population_size,
    validate_generation_count,
    validate_mutation_rate,
)

__all__ = [
    # Models
    "FitnessFunction",
    "Individual",
    "bits_to_float",
    "float_to_bits",
    "format_float32",
    # Crossover
    "byte_slice_crossover",
    # Mutation
    "flip_random_bit",
    "maybe_mutate",
    # Population
    "Population",
    "PopulationParams",
    # Generation
    "GenerationStats",
    # Engine
    "OptimizationTask",
    "optimize",
    # Exceptions
    "EvolutionError",
    "InvalidBoundsError",
    "InvalidPopulationSizeError",
    "InvalidGenerationCountError",
    "InvalidMutationRateError",
    "validate_bounds",
    "validate_population_size",
    "validate_generation_count",
    "validate_mutation_rate",
]
