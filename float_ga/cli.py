"""
Command line entry point

Runs one optimization and prints ``Result: <x>``. The defaults maximize sin
over [0, pi].
"""

import argparse
import logging
import math
from dataclasses import dataclass
from typing import Dict, List, Optional

from .evolution import (
    EvolutionError,
    FitnessFunction,
    OptimizationTask,
    format_float32,
    optimize,
)

LOGGER_NAME = "float_ga"

FITNESS_FUNCTIONS: Dict[str, FitnessFunction] = {
    "sin": math.sin,
    "cos": math.cos,
    "parabola": lambda x: -(x - 1.0) ** 2,
}


@dataclass
class RunOptions:
    min_bound: float
    max_bound: float
    mutation_probability: float
    population_size: int
    generations: int
    fitness: str
    seed: Optional[int]
    log_level: str


def parse_args(argv: Optional[List[str]] = None) -> RunOptions:
    parser = argparse.ArgumentParser(
        description="Maximize a one-argument function with a genetic algorithm"
    )
    parser.add_argument("--min-bound", type=float, default=0.0, help="Lower search bound")
    parser.add_argument("--max-bound", type=float, default=math.pi, help="Upper search bound")
    parser.add_argument(
        "--mutation-probability",
        type=float,
        default=0.5,
        help="Chance that a descendant gets a single bit flip",
    )
    parser.add_argument("--population-size", type=int, default=30000)
    parser.add_argument("--generations", type=int, default=100)
    parser.add_argument(
        "--fitness",
        choices=sorted(FITNESS_FUNCTIONS),
        default="sin",
        help="Function to maximize",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible runs")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (DEBUG, INFO, WARNING, ...)",
    )
    args = parser.parse_args(argv)
    return RunOptions(
        min_bound=args.min_bound,
        max_bound=args.max_bound,
        mutation_probability=args.mutation_probability,
        population_size=args.population_size,
        generations=args.generations,
        fitness=args.fitness,
        seed=args.seed,
        log_level=args.log_level.upper(),
    )


def setup_logging(level: str) -> logging.Logger:
    logging.basicConfig(
        format="%(asctime)s | %(levelname)5s | %(name)s | %(message)s",
        level=getattr(logging, level, logging.INFO),
    )
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, level, logging.INFO))
    return logger


def main(argv: Optional[List[str]] = None) -> int:
    opts = parse_args(argv)
    logger = setup_logging(opts.log_level)

    task = OptimizationTask(
        min_bound=opts.min_bound,
        max_bound=opts.max_bound,
        mutation_probability=opts.mutation_probability,
        population_size=opts.population_size,
        fitness_function=FITNESS_FUNCTIONS[opts.fitness],
        generations=opts.generations,
        seed=opts.seed,
    )

    try:
        result = optimize(task)
    except EvolutionError as e:
        logger.error("%s", e)
        return 2

    print(f"Result: {format_float32(result)}")
    return 0
