"""
Define the empty set
Author: lazyreach developers
"""
import torch
import lazyreach as lr
from .lazyset import LazySet


class EmptySet(LazySet):
    r""" The empty set :math:`\emptyset`

    There is exactly one empty set per data type, ``EmptySet(torch.double) is EmptySet(torch.double)``.
    The empty set is the absorbing element of the Cartesian product:

    .. math::

        \emptyset \times X = X \times \emptyset = \emptyset

    The product of two empty sets is only defined when they share the data type.
    """
    __instances = {}

    def __new__(cls, dtype=None):
        if dtype is None:
            dtype = lr.DEFAULT_OPTS.DTYPE
        elif dtype == float:
            dtype = torch.double
        assert isinstance(dtype, torch.dtype), f'dtype should be a torch.dtype, not {dtype}.'
        inst = cls.__instances.get(dtype)
        if inst is None:
            inst = super().__new__(cls)
            inst.__dtype = dtype
            cls.__instances[dtype] = inst
        return inst

    @property
    def dtype(self):
        return self.__dtype

    @property
    def dimension(self) -> int:
        return 0

    def is_empty(self) -> bool:
        return True

    def support_vector(self, d):
        raise ValueError('the support vector of an empty set is undefined')

    def membership(self, x) -> bool:
        return False

    def __mul__(self, other):
        '''
        Overloaded '*' operator, the empty set absorbs any set
        self: <EmptySet>
        other: <LazySet>
        return <EmptySet>
        '''
        if not isinstance(other, LazySet):
            return NotImplemented
        if isinstance(other, EmptySet) and other.dtype != self.dtype:
            raise TypeError(f'cannot multiply empty sets of different data types: {self.dtype} and {other.dtype}.')
        return self

    def __rmul__(self, other):
        if not isinstance(other, LazySet):
            return NotImplemented
        return self

    def __repr__(self):
        return f'EmptySet(dtype={self.dtype})'
