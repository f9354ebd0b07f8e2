"""
Define the abstract interface of a lazy set
Author: lazyreach developers
Reference: CORA, LazySets
"""
from __future__ import annotations
import abc
import torch
import lazyreach as lr
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import Union
    import numpy as np
    Vector = Union[torch.Tensor, np.ndarray, list]


class LazySet(metaclass=abc.ABCMeta):
    r""" Abstract base class of convex sets represented lazily

    A lazy set is only described by the answers it gives to two queries,
    the support vector in a direction :math:`d`

    .. math::

        \sigma(d, X) \in \operatorname{argmax}_{x \in X} d^\top x

    and the membership of a point. Compositions of lazy sets (e.g. Cartesian products)
    evaluate these queries on demand by dispatching them to their operands.

    Every concrete set defines :attr:`dimension`, :attr:`dtype`, :meth:`support_vector`
    and :meth:`membership`. The ``*`` operator builds the Cartesian product of two sets
    and ``M @ X`` builds the lazy linear map of ``X`` by the matrix ``M``.
    """
    # Set to allow matrix multiplication with numpy arrays
    __array_ufunc__ = None

    @property
    @abc.abstractmethod
    def dimension(self) -> int:
        '''
        The ambient dimension of the set
        return <int>
        '''

    @property
    def dim(self) -> int:
        '''
        Alias of :attr:`dimension`
        '''
        return self.dimension

    @property
    @abc.abstractmethod
    def dtype(self):
        '''
        The data type of the set
        return torch.float or torch.double
        '''

    @property
    def device(self):
        '''
        The device of the set
        return 'cpu', 'cuda:0', or ...
        '''
        return lr.DEFAULT_OPTS.DEVICE

    @abc.abstractmethod
    def support_vector(self, d: Vector) -> torch.Tensor:
        """ Compute a support vector of the set

        Args:
            d (torch.Tensor): direction, shape [nx]

        Returns:
            torch.Tensor: a point of the set maximizing ``d @ x``, shape [nx]
        """

    @abc.abstractmethod
    def membership(self, x: Vector) -> bool:
        """ Check whether a point is contained in the (closed) set

        Args:
            x (torch.Tensor): point, shape [nx]

        Returns:
            bool: True iff ``x`` is in the set
        """

    def support_function(self, d: Vector) -> torch.Tensor:
        """ Evaluate the support function of the set

        Args:
            d (torch.Tensor): direction, shape [nx]

        Returns:
            torch.Tensor: ``max_{x in X} d @ x`` as a 0-dimensional tensor
        """
        d = self._as_vector(d)
        return d @ self.support_vector(d)

    rho = support_function

    def is_empty(self) -> bool:
        '''
        Whether the set is empty. Only the empty set is.
        '''
        return False

    def __contains__(self, x) -> bool:
        return self.membership(x)

    def __mul__(self, other):
        '''
        Overloaded '*' operator for the Cartesian product
        self: <LazySet>
        other: <LazySet>
        return <CartesianProduct>, <CartesianProductArray> or <EmptySet>
        '''
        if not isinstance(other, LazySet):
            return NotImplemented
        # the empty set absorbs and an array grows in place, both before any new node is built
        if isinstance(other, (lr.EmptySet, lr.CartesianProductArray)):
            return other.__rmul__(self)
        return lr.CartesianProduct(self, other)

    def __rmatmul__(self, other):
        '''
        Overloaded reverted '@' operator for the lazy linear map of a set
        self: <LazySet>
        other: <torch.Tensor> or <numpy.ndarray>
        return <LinearMap>
        '''
        if isinstance(other, LazySet):
            return NotImplemented
        return lr.LinearMap(other, self)

    def _as_vector(self, v: Vector) -> torch.Tensor:
        return torch.as_tensor(v, dtype=self.dtype, device=self.device)

    def _check_vector(self, v: torch.Tensor, name: str = 'vector'):
        assert len(v.shape) == 1 and v.shape[0] == self.dimension, \
            f'The {name} should be of length {self.dimension}, but its shape is {tuple(v.shape)}.'
