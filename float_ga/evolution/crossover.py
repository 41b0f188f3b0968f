"""
交叉算子 (Crossover Operator)

交換兩個 32 位元基因型的大端序位元組片段，產生兩個子代基因型。
"""

from typing import Tuple

import numpy as np

# Big-endian unsigned 32-bit layout used when a genotype is sliced into bytes.
GENOTYPE_DTYPE = np.dtype(">u4")
GENOTYPE_BYTES = 4
CROSSOVER_POINT = 2


def genotype_to_bytes(genes: int) -> bytes:
    """Split a genotype into its four big-endian bytes."""
    return np.array(genes, dtype=GENOTYPE_DTYPE).tobytes()


def genotype_from_bytes(parts: bytes) -> np.uint32:
    """Join four big-endian bytes back into a genotype."""
    return np.frombuffer(parts, dtype=GENOTYPE_DTYPE)[0].astype(np.uint32)


def byte_slice_crossover(genes1: int, genes2: int) -> Tuple[np.uint32, np.uint32]:
    """Byte-slice crossover

    The cut always sits at byte boundary 2 of 4. For parents
    [a0, a1, a2, a3] and [b0, b1, b2, b3] the descendants are
    [a0, a1, b2, b3] and [b0, b1, a2, a3].

    Args:
        genes1: genotype of the first parent
        genes2: genotype of the second parent

    Returns:
        The two descendant genotypes (first-parent head, second-parent head)
    """
    parts1 = genotype_to_bytes(genes1)
    parts2 = genotype_to_bytes(genes2)

    offspring1 = parts1[:CROSSOVER_POINT] + parts2[CROSSOVER_POINT:]
    offspring2 = parts2[:CROSSOVER_POINT] + parts1[CROSSOVER_POINT:]

    return genotype_from_bytes(offspring1), genotype_from_bytes(offspring2)
