"""
Define the lazy convex hull of two sets
Author: lazyreach developers
Reference: LazySets
"""
import torch
from .lazyset import LazySet


class ConvexHull(LazySet):
    r""" Convex hull of the union of two sets

    .. math::

        CH(X, Y) := \left\{ \lambda x + (1 - \lambda) y \; \middle\vert \; x \in X, y \in Y, \lambda \in [0, 1] \right\}
    """
    def __init__(self, X: LazySet, Y: LazySet):
        assert isinstance(X, LazySet) and isinstance(Y, LazySet), \
            f'the operands should be sets, but {type(X)} and {type(Y)}.'
        assert X.dimension == Y.dimension, f'set dimension does not match: {X.dimension} and {Y.dimension}.'
        self.__X = X
        self.__Y = Y

    @property
    def X(self) -> LazySet:
        return self.__X

    @property
    def Y(self) -> LazySet:
        return self.__Y

    @property
    def dimension(self) -> int:
        return self.__X.dimension

    @property
    def dtype(self):
        return self.__X.dtype

    @property
    def device(self):
        return self.__X.device

    def support_vector(self, d) -> torch.Tensor:
        """ Support vector of the hull, the better of the support vectors of the two sets

        Ties are resolved in favor of the first set.
        """
        d = self._as_vector(d)
        self._check_vector(d, 'direction')
        sx = self.__X.support_vector(d)
        sy = self.__Y.support_vector(d)
        return sx if d @ sx >= d @ sy else sy

    def membership(self, x) -> bool:
        raise NotImplementedError('membership is not available for the lazy convex hull')

    def __repr__(self):
        return f'ConvexHull(\n   {self.__X!r},\n   {self.__Y!r}\n   )'
