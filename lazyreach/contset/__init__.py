"""
Lazy continuous set representation
Author: lazyreach developers
"""
import torch as _torch

class __DefaultOptions(object):
    __dtype: type = _torch.double
    __device: str = 'cpu'
    def __repr__(self):
        return f'Default Options of Continuous Set\n - dtype: {self.__dtype}\n - device: {self.__device}'
    def __str__(self):
        return self.__repr__()
    @property
    def DTYPE(self):
        return self.__dtype
    @property
    def DEVICE(self):
        return self.__device
    def set(self, dtype=None,device=None):
        if dtype is not None:
            if dtype == float:
                dtype = _torch.double
            assert dtype == _torch.float or dtype == _torch.double, 'Default dtype should be float.'
            self.__dtype = dtype
        if device is not None:
            self.__device = device

DEFAULT_OPTS = __DefaultOptions()

from .lazyset import LazySet
from .emptyset import EmptySet
from .linear_constraint import LinearConstraint
from .cartesian_product import CartesianProduct, CartesianProductArray
from .linear_map import LinearMap
from .convex_hull import ConvexHull
from .interval.interval import interval, BallInf
from .zonotope.zono import zonotope
from .parallelotope.hparallelotope import HParallelotope
