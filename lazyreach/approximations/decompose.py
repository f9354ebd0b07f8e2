"""
Decomposition of a set into a Cartesian product of low-dimensional boxes
Author: lazyreach developers
Reference: LazySets
"""
import logging
import math
import torch
import lazyreach as lr

logger = logging.getLogger(__name__)


def decompose(S, block_size: int = 2):
    """ Overapproximate a set by a Cartesian product of boxes

    The dimensions of ``S`` are split into consecutive blocks of ``block_size``
    (the last block may be smaller). The projection of ``S`` on each block is
    overapproximated by its bounding box, obtained from the support function of
    ``S`` in the directions ``e_i`` and ``-e_i``.

    Args:
        S (LazySet): set to decompose
        block_size (int, optional): dimension of the blocks. Defaults to 2.

    Returns:
        CartesianProductArray: one :class:`HParallelotope` with identity directions per block,
        whose offsets are the upper bounds followed by the negated lower bounds
    """
    assert isinstance(S, lr.LazySet), f'only a set can be decomposed, not {type(S)}.'
    assert isinstance(block_size, int) and block_size >= 1, f'the block size should be a positive integer, not {block_size}.'
    n = S.dimension
    E = torch.eye(n, dtype=S.dtype, device=S.device)

    n_blocks = math.ceil(n/block_size)
    logger.debug('decomposing a %d-dimensional set into %d blocks', n, n_blocks)
    result = lr.CartesianProductArray.with_capacity(n_blocks, dtype=S.dtype)
    for start in range(0, n, block_size):
        stop = min(start + block_size, n)
        upper = torch.stack([S.support_function(E[i]) for i in range(start, stop)])
        neg_lower = torch.stack([S.support_function(-E[i]) for i in range(start, stop)])
        D = torch.eye(stop - start, dtype=S.dtype, device=S.device)
        result = result * lr.HParallelotope(D, torch.hstack((upper, neg_lower)))
    return result
