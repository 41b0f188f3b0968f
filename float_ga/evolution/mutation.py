"""
突變算子 (Mutation Operator)

對 32 位元基因型執行點突變，每個子代最多翻轉一個位元。
"""

import random

import numpy as np

GENOTYPE_BITS = 32


def flip_random_bit(genes: int, rng: random.Random) -> np.uint32:
    """Flip one uniformly chosen bit (0-31) of the genotype.

    Args:
        genes: genotype to mutate
        rng: random source used to pick the bit position

    Returns:
        The mutated genotype
    """
    mask = np.uint32(1 << rng.randrange(GENOTYPE_BITS))
    return np.uint32(genes) ^ mask


def maybe_mutate(
    genes: int,
    mutation_probability: float,
    rng: random.Random,
) -> np.uint32:
    """Mutate with the given probability.

    A uniform draw in [0, 1) is compared with ``mutation_probability``; the
    genotype gets a single bit flip when the draw does not exceed it, so a
    probability of 1.0 always mutates.

    Args:
        genes: genotype of one descendant
        mutation_probability: chance of a bit flip, in [0, 1]
        rng: random source for the draw and the bit position

    Returns:
        The genotype, possibly with one bit flipped
    """
    if rng.random() <= mutation_probability:
        return flip_random_bit(genes, rng)
    return np.uint32(genes)
