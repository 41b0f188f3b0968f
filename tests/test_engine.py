"""
Tests for the optimization driver, its configuration checks and the
command line entry point.
"""

import math
import random

import numpy as np
import pytest

from float_ga.cli import main
from float_ga.evolution import (
    EvolutionError,
    GenerationStats,
    InvalidBoundsError,
    InvalidGenerationCountError,
    InvalidMutationRateError,
    InvalidPopulationSizeError,
    OptimizationTask,
    Population,
    PopulationParams,
    optimize,
)


def sin_task(**overrides) -> OptimizationTask:
    values = dict(
        min_bound=0.0,
        max_bound=math.pi,
        mutation_probability=0.5,
        population_size=200,
        fitness_function=math.sin,
        generations=30,
        seed=42,
    )
    values.update(overrides)
    return OptimizationTask(**values)


class TestOptimize:

    def test_sin_converges_to_half_pi(self):
        result = optimize(sin_task())
        assert abs(result - math.pi / 2) < 0.05

    def test_parabola_peak(self):
        task = sin_task(
            min_bound=-4.0,
            max_bound=4.0,
            population_size=400,
            fitness_function=lambda x: -(x - 1.0) ** 2,
        )
        assert abs(optimize(task) - 1.0) < 0.05

    def test_result_within_bounds(self):
        result = optimize(sin_task(population_size=5, generations=5))
        assert 0.0 <= result <= math.pi + 1e-6

    def test_zero_generations_returns_best_initial(self):
        task = sin_task(population_size=20, generations=0)
        expected = Population.create(task.to_population_params(), random.Random(42)).fittest()

        assert optimize(task) == float(expected.phenotype)

    def test_seed_is_reproducible(self):
        assert optimize(sin_task(generations=5)) == optimize(sin_task(generations=5))

    def test_explicit_rng(self):
        task = sin_task(seed=None, generations=5)
        assert optimize(task, rng=random.Random(1)) == optimize(task, rng=random.Random(1))

    def test_progress_callback(self):
        seen = []
        optimize(sin_task(generations=4), progress_callback=lambda gen, stats: seen.append((gen, stats)))

        assert [gen for gen, _ in seen] == [1, 2, 3, 4]
        for _, stats in seen:
            assert isinstance(stats, GenerationStats)
            assert stats.worst_fitness <= stats.average_fitness <= stats.best_fitness

    def test_invalid_task_raises(self):
        with pytest.raises(InvalidBoundsError):
            optimize(sin_task(min_bound=2.0, max_bound=1.0))

    def test_float32_overflowing_bounds_raise(self):
        task = sin_task(min_bound=-1e39, max_bound=1e39, population_size=20, generations=3)
        assert not task.validate()
        with pytest.raises(InvalidBoundsError):
            optimize(task)

    def test_float32_extreme_bounds_accepted(self):
        limit = float(np.finfo(np.float32).max)
        result = optimize(sin_task(min_bound=-limit, max_bound=limit, population_size=20,
                                   generations=3, fitness_function=lambda x: -abs(x)))
        assert math.isfinite(result)


class TestOptimizationTask:

    def test_valid_task(self):
        assert sin_task().validate()

    @pytest.mark.parametrize(
        "overrides, error",
        [
            (dict(min_bound=1.0, max_bound=0.0), InvalidBoundsError),
            (dict(max_bound=math.inf), InvalidBoundsError),
            (dict(min_bound=math.nan), InvalidBoundsError),
            (dict(min_bound=-1e39), InvalidBoundsError),
            (dict(max_bound=1e39), InvalidBoundsError),
            (dict(mutation_probability=1.5), InvalidMutationRateError),
            (dict(mutation_probability=-0.1), InvalidMutationRateError),
            (dict(population_size=0), InvalidPopulationSizeError),
            (dict(generations=-1), InvalidGenerationCountError),
        ],
    )
    def test_invalid_fields(self, overrides, error):
        task = sin_task(**overrides)
        assert not task.validate()
        with pytest.raises(error):
            task.check()

    def test_to_population_params(self):
        params = sin_task().to_population_params()
        assert params == PopulationParams(0.0, math.pi, 0.5, 200, math.sin)

    def test_error_message_includes_suggestion(self):
        error = InvalidPopulationSizeError(0)
        assert isinstance(error, EvolutionError)
        assert str(error) == (
            "Invalid population size: 0. Suggestion: Population size must be at least 1"
        )


class TestGenerationStats:

    def test_from_population(self):
        params = PopulationParams(0.0, math.pi, 0.1, 10, math.sin)
        p = Population.create(params, random.Random(3))
        stats = GenerationStats.from_population(0, p)

        fitness_values = [float(ind.fitness) for ind in p.individuals]
        assert stats.best_fitness == max(fitness_values)
        assert stats.worst_fitness == min(fitness_values)
        assert stats.best_phenotype == float(p.fittest().phenotype)


class TestCommandLine:

    def test_main_prints_result(self, capsys):
        code = main(["--population-size", "50", "--generations", "5", "--seed", "1"])
        out = capsys.readouterr().out

        assert code == 0
        assert out.startswith("Result: ")
        assert 0.0 <= float(out.split(":")[1]) <= math.pi + 1e-6

    def test_main_rejects_bad_bounds(self, capsys):
        code = main(["--min-bound", "3", "--max-bound", "1", "--population-size", "4"])
        assert code == 2
        assert capsys.readouterr().out == ""


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
