"""
Define a linear constraint
Author: lazyreach developers
"""
import torch
from .utils import infer_dtype


class LinearConstraint:
    r""" A single half-space constraint

    .. math::

        \left\{ x \in \mathbb{R}^n \; \middle\vert \; a^\top x \leq b \right\}
    """
    def __init__(self, a, b, dtype=None, device=None):
        """ Create a linear constraint

        Args:
            a (torch.Tensor): direction of the constraint, shape [n]
            b (float or torch.Tensor): offset of the constraint
            dtype (torch.dtype, optional): data type. If None, it is inferred from ``a`` and ``b``. Defaults to None.
            device (torch.device, optional): device. If None, it is inferred from ``a``. Defaults to None.
        """
        if dtype is None:
            dtype = infer_dtype(a, b)
        a = torch.as_tensor(a, dtype=dtype, device=device)
        b = torch.as_tensor(b, dtype=dtype, device=a.device)
        assert len(a.shape) == 1, f'the direction should be a vector, but its shape is {tuple(a.shape)}.'
        assert b.numel() == 1, f'the offset should be a scalar, but its shape is {tuple(b.shape)}.'
        self.__a = a
        self.__b = b.reshape(())

    @property
    def a(self) -> torch.Tensor:
        '''
        The direction of the constraint
        return <torch.Tensor>
        , shape [n]
        '''
        return self.__a

    @property
    def b(self) -> torch.Tensor:
        '''
        The offset of the constraint
        return <torch.Tensor>
        , shape []
        '''
        return self.__b

    @property
    def dimension(self) -> int:
        return self.__a.shape[0]

    @property
    def dtype(self):
        return self.__a.dtype

    def membership(self, x) -> bool:
        x = torch.as_tensor(x, dtype=self.dtype, device=self.__a.device)
        assert x.shape == self.__a.shape, f'The point should be of length {self.dimension}, but its shape is {tuple(x.shape)}.'
        return bool(self.__a @ x <= self.__b)

    def __contains__(self, x) -> bool:
        return self.membership(x)

    def __repr__(self):
        return f'LinearConstraint(a={self.__a.tolist()}, b={self.__b.item()})'
