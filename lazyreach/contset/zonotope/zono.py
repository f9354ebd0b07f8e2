"""
Define class for zonotope
Author: lazyreach developers
Reference: CORA
"""
import torch
import numpy as np
from scipy.optimize import linprog
import lazyreach as lr
from ..lazyset import LazySet
from ..utils import infer_dtype


class zonotope(LazySet):
    '''
    zono: <zonotope>

    Z: <torch.Tensor> center vector and generator matrix Z = [c,G]
    , shape [N+1, nx]
    center: <torch.Tensor> center vector
    , shape [nx]
    generators: <torch.Tensor> generator matrix
    , shape [N, nx]

    Eq.
    G = [[g1],[g2],...,[gN]]
    zono = {c + a1*g1 + a2*g2 + ... + aN*gN | coeff. a1,a2,...,aN \\in [-1,1] }
    '''
    def __init__(self,Z, dtype=None, device=None):
        # Make sure Z is a tensor
        if dtype is None:
            dtype = infer_dtype(Z)
        Z = torch.as_tensor(Z, dtype=dtype, device=device)

        assert len(Z.shape) == 2, f'The dimension of Z input should be 2, not {len(Z.shape)}.'
        assert Z.shape[0] >= 1, 'Z should contain at least the center.'
        self.Z = Z
    @property
    def dtype(self):
        '''
        The data type of a zonotope properties
        return torch.float or torch.double
        '''
        return self.Z.dtype
    @property
    def device(self):
        '''
        The device of a zonotope properties
        return 'cpu', 'cuda:0', or ...
        '''
        return self.Z.device
    @property
    def center(self):
        '''
        The center of a zonotope
        return <torch.Tensor>
        , shape [nx]
        '''
        return self.Z[0]
    @property
    def generators(self):
        '''
        Generators of a zonotope
        return <torch.Tensor>
        , shape [N, nx]
        '''
        return self.Z[1:]
    @property
    def dimension(self):
        '''
        The dimension of a zonotope
        return <int>, nx
        '''
        return self.Z.shape[1]
    @property
    def n_generators(self):
        '''
        The number of generators of a zonotope
        return <int>, N
        '''
        return len(self.Z)-1

    def __repr__(self):
        '''
        Representation of a zonotope as a text
        return <str>,
        ex. zonotope([[0., 0., 0.],[1., 0., 0.]])
        '''
        return str(self.Z).replace('tensor','zonotope')

    def __rmatmul__(self,other):
        '''
        Overloaded reverted '@' operator for matrix multiplication on vector elements of a zonotope
        self: <zonotope>
        other: <torch.Tensor> or <np.ndarray>, shape [m, nx]
        return <zonotope>
        '''
        if isinstance(other, LazySet):
            return NotImplemented
        other = torch.as_tensor(other, dtype=self.dtype, device=self.device)
        Z = self.Z@other.T
        return zonotope(Z)

    def support_vector(self, d):
        '''
        Support vector of a zonotope, c + sum_j sign(g_j @ d) g_j
        A generator orthogonal to d does not contribute, so the zero direction gives the center.
        d: <torch.Tensor>
        , shape [nx]
        return <torch.Tensor>
        , shape [nx]
        '''
        d = self._as_vector(d)
        self._check_vector(d, 'direction')
        G = self.generators
        return self.center + torch.sign(G@d)@G

    def membership(self, x):
        '''
        Membership of a point, solved as the feasibility problem
        find a in [-1,1]^N such that G^T a = x - c
        x: <torch.Tensor>
        , shape [nx]
        return <bool>
        '''
        x = self._as_vector(x)
        self._check_vector(x, 'point')
        z = self.deleteZerosGenerators()
        if z.n_generators == 0:
            return bool(torch.all(x == z.center))
        G = z.generators.detach().cpu().numpy()
        delta = (x - z.center).detach().cpu().numpy()
        res = linprog(np.zeros(z.n_generators), A_eq=G.T, b_eq=delta, bounds=(-1, 1))
        return res.status == 0

    def deleteZerosGenerators(self,eps=0):
        '''
        Delete zero vector generators
        return <zonotope>
        '''
        non_zero_idxs = torch.any(abs(self.generators)>eps,axis=1)
        Z = torch.vstack((self.center,self.generators[non_zero_idxs]))
        return zonotope(Z)

    def to_interval(self):
        '''
        Convert zonotope to interval
        return <interval>
        '''
        c = self.center
        delta = torch.sum(abs(self.Z),dim=0) - abs(c)
        leftLimit, rightLimit = c -delta, c + delta
        return lr.interval(leftLimit,rightLimit)
