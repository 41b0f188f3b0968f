"""
演化引擎 (Evolutionary Engine)

驅動種群演化固定世代數，並返回找到的最佳表現型。
"""

from dataclasses import dataclass
from typing import Callable, Optional
import logging
import random

from .exceptions import (
    EvolutionError,
    validate_bounds,
    validate_generation_count,
    validate_mutation_rate,
    validate_population_size,
)
from .generation import GenerationStats
from .models import FitnessFunction
from .population import Population, PopulationParams

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int, GenerationStats], None]


@dataclass
class OptimizationTask:
    """優化任務 (Optimization Task)

    Attributes:
        min_bound: lower end of the search interval
        max_bound: upper end of the search interval
        mutation_probability: per-descendant chance of a single bit flip (0-1)
        population_size: number of individuals kept each generation
        fitness_function: function to maximize
        generations: number of generational steps (0 keeps the initial population)
        seed: optional seed for the random source
    """
    min_bound: float
    max_bound: float
    mutation_probability: float
    population_size: int
    fitness_function: FitnessFunction
    generations: int
    seed: Optional[int] = None

    def validate(self) -> bool:
        """Check whether the task is well formed.

        Returns:
            Whether every field is within its allowed range
        """
        try:
            self.check()
        except EvolutionError:
            return False
        return True

    def check(self) -> None:
        """Raise the matching EvolutionError for the first invalid field.

        Raises:
            InvalidBoundsError: empty or non-finite interval
            InvalidMutationRateError: probability outside [0, 1]
            InvalidPopulationSizeError: size below 1
            InvalidGenerationCountError: negative generation count
        """
        validate_bounds(self.min_bound, self.max_bound)
        validate_mutation_rate(self.mutation_probability)
        validate_population_size(self.population_size)
        validate_generation_count(self.generations)

    def to_population_params(self) -> PopulationParams:
        return PopulationParams(
            min_bound=self.min_bound,
            max_bound=self.max_bound,
            mutation_probability=self.mutation_probability,
            population_size=self.population_size,
            fitness_function=self.fitness_function,
        )


def optimize(
    task: OptimizationTask,
    rng: Optional[random.Random] = None,
    progress_callback: Optional[ProgressCallback] = None,
) -> float:
    """Search for the phenotype that maximizes the task's fitness function.

    Builds the initial population, advances it exactly ``task.generations``
    times and returns the phenotype of the fittest individual.

    Args:
        task: optimization task
        rng: random source; when omitted one is seeded from ``task.seed``
        progress_callback: called with (generation, stats) after each step

    Returns:
        The best phenotype found

    Raises:
        EvolutionError: if the task is misconfigured
    """
    task.check()

    rng = rng or random.Random(task.seed)

    logger.info(
        "Optimizing over [%s, %s]: population %d, %d generations, mutation %.3f",
        task.min_bound, task.max_bound, task.population_size,
        task.generations, task.mutation_probability,
    )

    population = Population.create(task.to_population_params(), rng)

    for generation in range(1, task.generations + 1):
        population = population.next_generation()

        if progress_callback is not None or logger.isEnabledFor(logging.DEBUG):
            stats = GenerationStats.from_population(generation, population)
            logger.debug(
                "Generation %d: best %s at x=%s",
                generation, stats.best_fitness, stats.best_phenotype,
            )
            if progress_callback is not None:
                progress_callback(generation, stats)

    best = population.fittest()
    logger.info("Best individual after %d generations: %s", task.generations, best)

    return float(best.phenotype)
