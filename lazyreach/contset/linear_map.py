"""
Define the lazy linear map of a set
Author: lazyreach developers
Reference: LazySets
"""
import torch
from .lazyset import LazySet


class LinearMap(LazySet):
    r""" Image of a set under a linear map

    .. math::

        M X := \left\{ M x \; \middle\vert \; x \in X \right\}

    The support vector is :math:`\sigma(d, MX) = M \sigma(M^\top d, X)`.
    """
    def __init__(self, M, X: LazySet):
        assert isinstance(X, LazySet), f'the mapped object should be a set, not {type(X)}.'
        M = torch.as_tensor(M, dtype=X.dtype, device=X.device)
        assert len(M.shape) == 2, f'the map should be a matrix, but its shape is {tuple(M.shape)}.'
        assert M.shape[1] == X.dimension, f'the map has {M.shape[1]} columns but the set is {X.dimension} dimensional.'
        self.__M = M
        self.__X = X

    @property
    def M(self) -> torch.Tensor:
        '''
        The matrix of the map
        return <torch.Tensor>
        , shape [m, n]
        '''
        return self.__M

    @property
    def X(self) -> LazySet:
        '''
        The mapped set
        '''
        return self.__X

    @property
    def dimension(self) -> int:
        return self.__M.shape[0]

    @property
    def dtype(self):
        return self.__X.dtype

    @property
    def device(self):
        return self.__X.device

    def support_vector(self, d) -> torch.Tensor:
        d = self._as_vector(d)
        self._check_vector(d, 'direction')
        return self.__M @ self.__X.support_vector(self.__M.T @ d)

    def membership(self, x) -> bool:
        """ Membership of a point, only available for a square map

        The point is mapped back by solving ``M y = x``; a singular map raises
        :class:`torch.linalg.LinAlgError`.
        """
        x = self._as_vector(x)
        self._check_vector(x, 'point')
        if self.__M.shape[0] != self.__M.shape[1]:
            raise NotImplementedError('membership is only available for the linear map of a set by a square matrix')
        return self.__X.membership(torch.linalg.solve(self.__M, x))

    def __rmatmul__(self, other):
        '''
        Overloaded reverted '@' operator, composes the two maps
        self: <LinearMap>
        other: <torch.Tensor>
        return <LinearMap>
        '''
        if isinstance(other, LazySet):
            return NotImplemented
        other = torch.as_tensor(other, dtype=self.dtype, device=self.device)
        return LinearMap(other @ self.__M, self.__X)

    def __repr__(self):
        return f'LinearMap(\n   {self.__M!r},\n   {self.__X!r}\n   )'
