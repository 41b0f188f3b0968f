"""
世代統計 (Generation Statistics)

單一世代的統計摘要，提供給進度回調函數。
"""

from dataclasses import dataclass

from .population import Population


@dataclass
class GenerationStats:
    """世代統計

    Attributes:
        generation: generation number (1 for the first step)
        best_fitness: highest fitness in the population
        average_fitness: mean fitness
        worst_fitness: lowest fitness
        best_phenotype: phenotype of the fittest individual
    """
    generation: int
    best_fitness: float
    average_fitness: float
    worst_fitness: float
    best_phenotype: float

    @classmethod
    def from_population(cls, generation: int, population: Population) -> "GenerationStats":
        """Compute statistics for a population.

        Args:
            generation: generation number
            population: population to summarize

        Returns:
            Statistics of that population
        """
        fitness_values = [float(ind.fitness) for ind in population.individuals]
        best = population.fittest()

        return cls(
            generation=generation,
            best_fitness=float(best.fitness),
            average_fitness=sum(fitness_values) / len(fitness_values),
            worst_fitness=min(fitness_values),
            best_phenotype=float(best.phenotype),
        )
