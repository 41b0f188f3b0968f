"""
個體資料模型 (Individual Data Model)

候選解：float32 表現型、快取的適應度，以及產生該適應度的適應度函數。
基因型為表現型的 IEEE-754 binary32 位元樣式，於需要時即時推導。
"""

from dataclasses import dataclass, field
from functools import total_ordering
from typing import Callable, Tuple
import math
from random import Random

import numpy as np

from .crossover import byte_slice_crossover
from .mutation import maybe_mutate

FitnessFunction = Callable[[float], float]


def float_to_bits(value: float) -> np.uint32:
    """Reinterpret a float32 value as its 32-bit unsigned bit pattern."""
    return np.float32(value).view(np.uint32)


def bits_to_float(bits: int) -> np.float32:
    """Reinterpret a 32-bit unsigned bit pattern as a float32 value."""
    return np.uint32(bits).view(np.float32)


def format_float32(value: float) -> str:
    """Shortest text that round-trips as float32 (``0.0`` renders as ``0``)."""
    value = np.float32(value)
    if not math.isfinite(value):
        return "NaN" if math.isnan(value) else ("inf" if value > 0 else "-inf")
    return np.format_float_positional(value, unique=True, trim="-")


@total_ordering
@dataclass(frozen=True, eq=False)
class Individual:
    """個體 (Individual)

    Ordered and compared by fitness only: two individuals with the same
    fitness are equal even when their phenotypes differ.

    Attributes:
        x: phenotype (float32)
        y: fitness, the fitness function evaluated at ``x`` (float32)
        fitness_function: function used to compute ``y``
    """
    x: np.float32
    y: np.float32
    fitness_function: FitnessFunction = field(repr=False)

    @classmethod
    def random(
        cls,
        min_bound: float,
        max_bound: float,
        fitness_function: FitnessFunction,
        rng: Random,
    ) -> "Individual":
        """Sample a phenotype uniformly from [min_bound, max_bound].

        Args:
            min_bound: lower end of the search interval
            max_bound: upper end of the search interval
            fitness_function: function to evaluate at the sampled phenotype
            rng: random source

        Returns:
            The new individual
        """
        low = float(np.float32(min_bound))
        high = float(np.float32(max_bound))
        return cls.from_phenotype(rng.uniform(low, high), fitness_function)

    @classmethod
    def from_phenotype(cls, x: float, fitness_function: FitnessFunction) -> "Individual":
        """Evaluate the fitness function at ``x`` and wrap both.

        Non-finite phenotypes get a NaN fitness without calling the function.
        """
        x = np.float32(x)
        if math.isfinite(x):
            y = np.float32(fitness_function(float(x)))
        else:
            y = np.float32(math.nan)
        return cls(x=x, y=y, fitness_function=fitness_function)

    @classmethod
    def from_genotype(cls, bits: int, fitness_function: FitnessFunction) -> "Individual":
        """Rebuild an individual from a 32-bit genotype.

        The bits are taken as the binary32 representation of the phenotype;
        this is a reinterpretation, not a numeric conversion.
        """
        return cls.from_phenotype(bits_to_float(bits), fitness_function)

    @property
    def phenotype(self) -> np.float32:
        return self.x

    @property
    def fitness(self) -> np.float32:
        return self.y

    def genotype(self) -> np.uint32:
        """Bit pattern of the phenotype."""
        return float_to_bits(self.x)

    def mate(
        self,
        other: "Individual",
        mutation_probability: float,
        rng: Random,
    ) -> Tuple["Individual", "Individual"]:
        """Produce two descendants by crossover and mutation.

        The genotypes are recombined by byte-slice crossover, then each
        descendant independently mutates one bit with probability
        ``mutation_probability``. Both descendants use this individual's
        fitness function.

        Args:
            other: second parent
            mutation_probability: per-descendant chance of a single bit flip
            rng: random source for the mutation draws

        Returns:
            The two descendants
        """
        offspring_genes = byte_slice_crossover(self.genotype(), other.genotype())

        return tuple(
            Individual.from_genotype(
                maybe_mutate(genes, mutation_probability, rng),
                self.fitness_function,
            )
            for genes in offspring_genes
        )

    def is_invalid(self) -> bool:
        """True when the phenotype is NaN or infinite."""
        return not math.isfinite(self.x)

    def is_left_of(self, other: "Individual") -> bool:
        return bool(self.x < other.x)

    def is_right_of(self, other: "Individual") -> bool:
        return bool(self.x > other.x)

    def __lt__(self, other: "Individual") -> bool:
        if not isinstance(other, Individual):
            return NotImplemented
        return bool(self.y < other.y)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Individual):
            return NotImplemented
        return bool(self.y == other.y)

    def __hash__(self) -> int:
        return hash(float(self.y))

    def __str__(self) -> str:
        return f"({format_float32(self.x)}, {format_float32(self.y)})"

    __repr__ = __str__
