"""
Define the Cartesian product of sets
Author: lazyreach developers
Reference: LazySets
"""
import torch
import lazyreach as lr
import lazyreach.internal as lri
from .lazyset import LazySet


def _check_same_dtype(X, Y):
    if lri.__debug_extra__:
        assert X.dtype == Y.dtype, f'the sets of a Cartesian product should share the data type, but they are {X.dtype} and {Y.dtype}.'


class CartesianProduct(LazySet):
    r""" Cartesian product of two sets

    .. math::

        X \times Y := \left\{ [x; y] \; \middle\vert \; x \in X, y \in Y \right\}

    The product is lazy: queries are split along the dimensions of ``X`` and ``Y``
    and answered by the operands. A product of more sets is obtained recursively,
    see :meth:`from_list`. See also :class:`CartesianProductArray` for a flat
    product of many sets.
    """
    def __init__(self, X: LazySet, Y: LazySet):
        assert isinstance(X, LazySet) and isinstance(Y, LazySet), \
            f'the operands should be sets, but {type(X)} and {type(Y)}.'
        _check_same_dtype(X, Y)
        self.__X = X
        self.__Y = Y

    @classmethod
    def from_list(cls, sets, dtype=None):
        """ Fold a list of sets into a right-nested chain of binary products

        Args:
            sets (list): the sets ``[X1, X2, ..., Xm]``
            dtype (torch.dtype, optional): data type of the empty set returned for an empty list.

        Returns:
            LazySet: the :class:`EmptySet` if ``sets`` is empty, ``X1`` itself if it is
            the only set, ``X1 * (X2 * (... * Xm))`` otherwise.
        """
        sets = list(sets)
        if len(sets) == 0:
            return lr.EmptySet(dtype)
        if len(sets) == 1:
            return sets[0]
        if len(sets) == 2:
            return cls(sets[0], sets[1])
        return cls(sets[0], cls.from_list(sets[1:]))

    @property
    def X(self) -> LazySet:
        '''
        The first set of the product
        '''
        return self.__X

    @property
    def Y(self) -> LazySet:
        '''
        The second set of the product
        '''
        return self.__Y

    @property
    def dimension(self) -> int:
        return self.__X.dimension + self.__Y.dimension

    @property
    def dtype(self):
        return self.__X.dtype

    @property
    def device(self):
        return self.__X.device

    def support_vector(self, d) -> torch.Tensor:
        """ Support vector of the product, the concatenation of the support vectors of the operands

        If the direction is zero the result depends on the operands.
        """
        d = self._as_vector(d)
        self._check_vector(d, 'direction')
        n = self.__X.dimension
        return torch.cat((self.__X.support_vector(d[:n]), self.__Y.support_vector(d[n:])))

    def membership(self, x) -> bool:
        x = self._as_vector(x)
        self._check_vector(x, 'point')
        n = self.__X.dimension
        return bool(self.__X.membership(x[:n]) and self.__Y.membership(x[n:]))

    def __repr__(self):
        return f'CartesianProduct(\n   {self.__X!r},\n   {self.__Y!r}\n   )'


class CartesianProductArray(LazySet):
    r""" Cartesian product of a finite number of sets

    .. math::

        X_1 \times X_2 \times \cdots \times X_m

    The sets are kept in the list :attr:`sfarray` and the queries walk it once,
    without recursion.

    The array is the only mutable set. Multiplying it with a set, from the left or
    from the right, appends the set to the END of :attr:`sfarray` and returns the
    array itself; multiplying two arrays appends the sets of the second one to the
    first one. The list is modified in place, so every reference to the array sees
    the new sets.
    """
    def __init__(self, sfarray=None, dtype=None):
        """ Create a Cartesian product array

        Args:
            sfarray (list, optional): the sets of the product, copied into a new list. Defaults to None (no set).
            dtype (torch.dtype, optional): data type of the product. If None, it is inferred from the first set or
                taken from :data:`lazyreach.contset.DEFAULT_OPTS` for an empty product. Defaults to None.
        """
        sfarray = [] if sfarray is None else list(sfarray)
        for S in sfarray:
            assert isinstance(S, LazySet), f'the elements should be sets, but {type(S)}.'
        if dtype is None:
            dtype = sfarray[0].dtype if len(sfarray) > 0 else lr.DEFAULT_OPTS.DTYPE
        self.__dtype = dtype
        self.__sfarray = sfarray
        for S in sfarray:
            _check_same_dtype(self, S)

    @classmethod
    def with_capacity(cls, n: int, dtype=None):
        """ Create an empty product meant to receive ``n`` sets

        Python lists grow in amortized constant time, so ``n`` is only validated.

        Args:
            n (int): expected number of sets
            dtype (torch.dtype, optional): data type of the product. Defaults to the default dtype.

        Returns:
            CartesianProductArray: an empty product
        """
        assert isinstance(n, int) and n >= 0, f'the size hint should be a non-negative integer, not {n}.'
        return cls(dtype=dtype)

    @property
    def sfarray(self) -> list:
        '''
        The list of sets of the product (not a copy)
        '''
        return self.__sfarray

    @property
    def dimension(self) -> int:
        return 0 if len(self.__sfarray) == 0 else sum(S.dimension for S in self.__sfarray)

    @property
    def dtype(self):
        return self.__dtype

    @property
    def device(self):
        return self.__sfarray[0].device if len(self.__sfarray) > 0 else lr.DEFAULT_OPTS.DEVICE

    def __iter__(self):
        return iter(self.__sfarray)

    def __getitem__(self, pos):
        return self.__sfarray[pos]

    def append(self, S: LazySet):
        '''
        Append a set at the end of the product
        return <CartesianProductArray>, self
        '''
        assert isinstance(S, LazySet), f'only a set can be appended, not {type(S)}.'
        _check_same_dtype(self, S)
        self.__sfarray.append(S)
        return self

    def extend(self, other):
        '''
        Append the sets of another product at the end of this product
        return <CartesianProductArray>, self
        '''
        assert isinstance(other, CartesianProductArray)
        _check_same_dtype(self, other)
        self.__sfarray.extend(other.sfarray)
        return self

    def __mul__(self, other):
        '''
        Overloaded '*' operator, multiplies a set to the product from the right
        self: <CartesianProductArray> (is modified)
        other: <LazySet>
        return <CartesianProductArray>, self, or <EmptySet>
        '''
        if not isinstance(other, LazySet):
            return NotImplemented
        if isinstance(other, lr.EmptySet):
            return other
        if isinstance(other, CartesianProductArray):
            return self.extend(other)
        return self.append(other)

    def __rmul__(self, other):
        '''
        Overloaded reverted '*' operator, multiplies a set to the product from the left.
        The set is appended at the end as well.
        self: <CartesianProductArray> (is modified)
        other: <LazySet>
        return <CartesianProductArray>, self
        '''
        if not isinstance(other, LazySet):
            return NotImplemented
        return self.append(other)

    def support_vector(self, d) -> torch.Tensor:
        """ Support vector of the product, assembled block by block

        If the direction is zero the result depends on the sets of the product.
        """
        d = self._as_vector(d)
        self._check_vector(d, 'direction')
        svec = torch.empty_like(d)
        jinit = 0
        for S in self.__sfarray:
            jend = jinit + S.dimension
            svec[jinit:jend] = S.support_vector(d[jinit:jend])
            jinit = jend
        return svec

    def membership(self, x) -> bool:
        x = self._as_vector(x)
        self._check_vector(x, 'point')
        jinit = 0
        for S in self.__sfarray:
            jend = jinit + S.dimension
            if not S.membership(x[jinit:jend]):
                return False
            jinit = jend
        return True

    def __repr__(self):
        sets = ''.join(f'\n   {S!r},' for S in self.__sfarray)
        return f'CartesianProductArray({sets}\n   )'
