'''
Define interval
Author: lazyreach developers
Reference: CORA, LazySets
'''

import torch
import lazyreach as lr
import lazyreach.internal as lri
from ..lazyset import LazySet
from ..linear_constraint import LinearConstraint
from ..utils import infer_dtype

class interval(LazySet):
    r""" Vector intervals (axis-aligned boxes)

    Here, we define an interval as a set of real vectors given infimum and supremum vectors
    :math:`\underbar{x}` and :math:`\overline{\text{x}}` such that

    .. math::

        \mathcal{I} := \left\{
            x \in \mathbb{R}^{n}
            \; \middle\vert \;
            \underbar{x}_{i} \leq x_{i} \leq \overline{\text{x}}_{i}
            \quad \forall{i=1,\ldots,n}
            \right\}

    """
    def __init__(self, inf=None, sup=None, dtype=None, device=None):
        """ Create an interval

        If only one of ``inf`` or ``sup`` is ``None``, the interval is created as a point interval where ``inf = sup``.

        Args:
            inf (torch.Tensor, optional): infimum of the interval. Defaults to None.
            sup (torch.Tensor, optional): supremum of the interval. Defaults to None.
            dtype (torch.dtype, optional): data type of the interval. If None, the data type is inferred from the input tensors. Defaults to None.
            device (torch.device, optional): device of the interval. If None, the device is inferred from the input tensors. Defaults to None.

        Raises:
            AssertionError: If both ``inf`` and ``sup`` are ``None``.
            AssertionError: If ``inf`` and ``sup`` are not vectors of the same shape.
            AssertionError: If ``inf`` is not less than or equal to ``sup`` entry-wise and :const:`lazyreach.internal.__debug_extra__` is True.
        """
        assert inf is not None or sup is not None, 'at least one of inf and sup should be given; use EmptySet for the empty set'
        if inf is None:
            inf = sup
        elif sup is None:
            sup = inf

        if dtype is None:
            dtype = infer_dtype(inf, sup)

        # Make sure that the input is a tensor
        inf = torch.as_tensor(inf, dtype=dtype, device=device)
        sup = torch.as_tensor(sup, dtype=dtype, device=device)

        assert len(inf.shape) == 1, f"inf and sup are expected to be vectors, not of shape {tuple(inf.shape)}"
        assert inf.shape == sup.shape, "inf and sup are expected to be of the same shape"
        assert inf.device == sup.device, "inf and sup are expected to be on the same device"
        if lri.__debug_extra__: assert torch.all(inf <= sup), "inf should be less than sup entry-wise"

        self.__inf = inf
        self.__sup = sup

    @property
    def dtype(self):
        '''
        The data type of an interval properties
        return torch.float or torch.double
        '''
        return self.inf.dtype
    @property
    def device(self):
        '''
        The device of an interval properties
        return 'cpu', 'cuda:0', or ...
        '''
        return self.inf.device
    @property
    def inf(self):
        '''
        The infimum of an interval
        return <torch.Tensor>
        ,shape [n]
        '''
        return self.__inf
    @property
    def sup(self):
        '''
        The supremum of an interval
        return <torch.Tensor>
        ,shape [n]
        '''
        return self.__sup
    @property
    def dimension(self) -> int:
        '''
        The dimension of an interval
        return <int>, n
        '''
        return self.__inf.shape[0]

    def __repr__(self):
        '''
        Representation of an interval as a text
        return <str>,
        ex. interval(
               inf([0., 0.]),
               sup([1., 1.])
               )
        '''
        intv_repr1 = f"interval(\n"+str(self.__inf)+","
        intv_repr2 = "\n"+str(self.__sup)
        intv_repr = intv_repr1.replace('tensor(','   inf(') + intv_repr2.replace('tensor(','   sup(')
        return intv_repr+"\n   )"

    def center(self) -> torch.Tensor:
        """ Compute the center of the interval

        The center of the interval is the midpoint of the infimum and supremum.

        Returns:
            torch.Tensor: center of the interval
        """
        return (self.inf+self.sup)/2

    def rad(self) -> torch.Tensor:
        """ Compute the radius of the interval

        The radius of the interval is half of the difference between the supremum and infimum.
        It can be viewed as the distance from the center to the infimum or supremum.

        Returns:
            torch.Tensor: radius of the interval
        """
        return (self.sup-self.inf)/2

    def support_vector(self, d) -> torch.Tensor:
        """ Support vector of the interval

        Each coordinate is the infimum where the direction is negative and the supremum
        otherwise, so the zero direction gives the supremum.
        """
        d = self._as_vector(d)
        self._check_vector(d, 'direction')
        return torch.where(d < 0, self.__inf, self.__sup)

    def membership(self, x) -> bool:
        x = self._as_vector(x)
        self._check_vector(x, 'point')
        return bool(torch.all(self.__inf <= x) and torch.all(x <= self.__sup))

    def constraints_list(self) -> list:
        """ Half-space constraints of the interval

        Returns:
            list: ``e_i @ x <= sup_i`` for every axis, then ``-e_i @ x <= -inf_i``
        """
        E = torch.eye(self.dimension, dtype=self.dtype, device=self.device)
        return [LinearConstraint(e, s) for e, s in zip(E, self.__sup)] \
            + [LinearConstraint(-e, -i) for e, i in zip(E, self.__inf)]

    def to_hparallelotope(self):
        '''
        Convert interval to a parallelotope with the identity directions
        return <HParallelotope>
        '''
        D = torch.eye(self.dimension, dtype=self.dtype, device=self.device)
        return lr.HParallelotope(D, torch.hstack((self.__sup, -self.__inf)))

    def to_zonotope(self):
        '''
        Convert interval to zonotope
        return <zonotope>
        '''
        Z = torch.vstack((self.center(), torch.diag(self.rad())))
        return lr.zonotope(Z)


class BallInf(interval):
    r""" Ball in the infinity norm

    .. math::

        \mathcal{B}_\infty(c, r) := \left\{ x \in \mathbb{R}^n \; \middle\vert \; \|x - c\|_\infty \leq r \right\}
    """
    def __init__(self, center, radius, dtype=None, device=None):
        if dtype is None:
            dtype = infer_dtype(center, radius)
        center = torch.as_tensor(center, dtype=dtype, device=device)
        radius = torch.as_tensor(radius, dtype=center.dtype, device=center.device)
        assert radius.numel() == 1 and radius >= 0, f'the radius should be a non-negative scalar, not {radius}.'
        self.__radius = radius.reshape(())
        super().__init__(center - self.__radius, center + self.__radius)

    @property
    def radius(self) -> torch.Tensor:
        '''
        The radius of the ball
        return <torch.Tensor>
        , shape []
        '''
        return self.__radius

    def __repr__(self):
        return f'BallInf({self.center().tolist()}, {self.__radius.item()})'
