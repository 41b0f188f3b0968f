"""
種群 (Population)

固定大小且不可變的個體集合。每個世代步驟由親代與可接納子代的聯集，
經精英截斷選擇產生新的種群。
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple
import logging
import random

from .models import FitnessFunction, Individual

logger = logging.getLogger(__name__)


def fork_rng(rng: random.Random) -> random.Random:
    """Independent copy of a random source at its current state."""
    fork = random.Random()
    fork.setstate(rng.getstate())
    return fork


@dataclass
class PopulationParams:
    """種群參數 (Population Parameters)

    Parameters for building the initial population

    Attributes:
        min_bound: lower end of the search interval
        max_bound: upper end of the search interval
        mutation_probability: per-descendant chance of a single bit flip
        population_size: number of individuals kept each generation
        fitness_function: function to maximize
    """
    min_bound: float
    max_bound: float
    mutation_probability: float
    population_size: int
    fitness_function: FitnessFunction


@dataclass(frozen=True)
class Population:
    """種群 (Population)

    Attributes:
        individuals: current members
        min_bound: lower end of the search interval
        max_bound: upper end of the search interval
        mutation_probability: per-descendant chance of a single bit flip
        fitness_function: function to maximize
        left: sentinel evaluated exactly at ``min_bound``
        right: sentinel evaluated exactly at ``max_bound``
        rng: random source owned by this population, never shared with another
    """
    individuals: Tuple[Individual, ...]
    min_bound: float
    max_bound: float
    mutation_probability: float
    fitness_function: FitnessFunction = field(repr=False)
    left: Individual = field(repr=False)
    right: Individual = field(repr=False)
    rng: random.Random = field(repr=False, compare=False)

    @classmethod
    def create(
        cls,
        params: PopulationParams,
        rng: Optional[random.Random] = None,
    ) -> "Population":
        """Build a population of random individuals within the bounds.

        Args:
            params: population parameters
            rng: random source, a fresh unseeded ``random.Random`` when omitted

        Returns:
            The initial population
        """
        rng = rng or random.Random()

        individuals = tuple(
            Individual.random(
                params.min_bound,
                params.max_bound,
                params.fitness_function,
                rng,
            )
            for _ in range(params.population_size)
        )

        return cls(
            individuals=individuals,
            min_bound=params.min_bound,
            max_bound=params.max_bound,
            mutation_probability=params.mutation_probability,
            fitness_function=params.fitness_function,
            left=Individual.from_phenotype(params.min_bound, params.fitness_function),
            right=Individual.from_phenotype(params.max_bound, params.fitness_function),
            rng=fork_rng(rng),
        )

    @property
    def size(self) -> int:
        return len(self.individuals)

    def next_generation(self, rng: Optional[random.Random] = None) -> "Population":
        """Advance one generation.

        The members are shuffled and paired off in order; an odd leftover
        does not mate. Descendants that pass the admission filter join a pool
        holding every current member, and the fittest ``size`` of that pool
        survive. The receiver is not modified.

        Args:
            rng: random source for this step; when omitted a copy of the
                population's own source is used, leaving the receiver untouched

        Returns:
            The next population, same size, bounds and sentinels
        """
        if rng is None:
            rng = fork_rng(self.rng)

        parents = list(self.individuals)
        rng.shuffle(parents)

        pool = list(self.individuals)
        admitted = 0
        pairs = self.mating_pairs(parents)

        for ancestor1, ancestor2 in pairs:
            for descendant in ancestor1.mate(ancestor2, self.mutation_probability, rng):
                if self.admits(descendant):
                    pool.append(descendant)
                    admitted += 1

        logger.debug(
            "Mated %d pairs: %d descendants admitted, %d rejected",
            len(pairs), admitted, 2 * len(pairs) - admitted,
        )

        # stable sort: equal-fitness individuals keep their pool order
        survivors = sorted(pool, reverse=True)[:self.size]

        return Population(
            individuals=tuple(survivors),
            min_bound=self.min_bound,
            max_bound=self.max_bound,
            mutation_probability=self.mutation_probability,
            fitness_function=self.fitness_function,
            left=self.left,
            right=self.right,
            rng=fork_rng(rng),
        )

    @staticmethod
    def mating_pairs(parents: List[Individual]) -> List[Tuple[Individual, Individual]]:
        """Consecutive non-overlapping pairs; an odd leftover is dropped."""
        return list(zip(parents[0::2], parents[1::2]))

    def admits(self, descendant: Individual) -> bool:
        """Admission filter for descendants

        A descendant is rejected when its phenotype lies strictly left of the
        left sentinel, strictly right of the right sentinel, or is not finite.
        Phenotypes equal to a bound are admitted.
        """
        if descendant.is_left_of(self.left):
            return False
        if descendant.is_right_of(self.right):
            return False
        if descendant.is_invalid():
            return False
        return True

    def fittest(self) -> Individual:
        """Individual with the highest fitness."""
        return sorted(self.individuals, reverse=True)[0]

    def __len__(self) -> int:
        return len(self.individuals)

    def __str__(self) -> str:
        return "[" + "".join(str(individual) for individual in self.individuals) + "]"
