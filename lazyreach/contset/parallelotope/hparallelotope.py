"""
Define class for parallelotope in constraint representation
Author: lazyreach developers
Reference: LazySets, Dreossi et al. (2017)
"""
import logging
import torch
import lazyreach as lr
from ..lazyset import LazySet
from ..linear_constraint import LinearConstraint
from ..utils import infer_dtype

logger = logging.getLogger(__name__)


class HParallelotope(LazySet):
    r""" Parallelotope in constraint representation

    Parallelotopes are centrally symmetric convex polytopes in :math:`\mathbb{R}^n` having
    :math:`2n` pairwise parallel constraints. Every parallelotope is a zonotope, see
    :meth:`to_zonotope` for the generator representation.

    Let :math:`D \in \mathbb{R}^{n \times n}` be the directions matrix and
    :math:`c \in \mathbb{R}^{2n}` the offset vector. The parallelotope is

    .. math::

        \mathcal{P} := \left\{
            x \in \mathbb{R}^{n}
            \; \middle\vert \;
            D_i x \leq c_i, \; -D_i x \leq c_{n+i}
            \quad \forall{i=1,\ldots,n}
            \right\}

    where :math:`D_i` is the :math:`i`-th row of :math:`D`.

    The vertices and generators are derived from :math:`(D, c)` by linear solves on every call.
    A singular directions matrix makes them raise :class:`torch.linalg.LinAlgError`.

    References:
        [1] T. Dreossi, T. Dang, C. Piazza. Reachability computation for polynomial dynamical systems.
        Formal Methods in System Design 50.1 (2017): 1-38.

        [2] T. Dreossi, T. Dang, C. Piazza. Parallelotope bundles for polynomial reachability. HSCC 2016.
    """
    def __init__(self, directions, offset, dtype=None, device=None):
        """ Create a parallelotope

        Args:
            directions (torch.Tensor): square matrix, each row is the direction of two parallel constraints, shape [n, n]
            offset (torch.Tensor): offsets of the constraints, shape [2n]
            dtype (torch.dtype, optional): data type. If None, it is inferred from the inputs. Defaults to None.
            device (torch.device, optional): device. If None, it is inferred from the inputs. Defaults to None.

        Raises:
            AssertionError: If ``directions`` is not square or ``offset`` is not of length ``2n``.
        """
        if dtype is None:
            dtype = infer_dtype(directions, offset)
        D = torch.as_tensor(directions, dtype=dtype, device=device)
        c = torch.as_tensor(offset, dtype=dtype, device=D.device)

        assert len(D.shape) == 2 and D.shape[0] == D.shape[1], f'the directions matrix should be square, but its shape is {tuple(D.shape)}.'
        assert len(c.shape) == 1 and c.shape[0] == 2*D.shape[0], \
            f'the length of the offset vector should be twice the size of the directions matrix, ' \
            f'but they are {tuple(c.shape)} and {tuple(D.shape)} dimensional respectively'

        self.__directions = D
        self.__offset = c

    @property
    def directions(self) -> torch.Tensor:
        '''
        The directions matrix, the negated directions -D_i are implicit
        return <torch.Tensor>, shape [n, n]
        '''
        return self.__directions

    @property
    def offset(self) -> torch.Tensor:
        '''
        The offsets, c[:n] for the directions and c[n:] for the negated directions
        return <torch.Tensor>, shape [2n]
        '''
        return self.__offset

    @property
    def dimension(self) -> int:
        return self.__directions.shape[0]

    @property
    def dtype(self):
        return self.__directions.dtype

    @property
    def device(self):
        return self.__directions.device

    def base_vertex(self) -> torch.Tensor:
        r""" Compute the base vertex, the point on which the generators are anchored

        The base vertex :math:`q` solves :math:`D q = -c_{n+1:2n}`, i.e. it makes every
        negated constraint tight.

        Returns:
            torch.Tensor: base vertex, shape [n]
        """
        n = self.dimension
        logger.debug('solving for the base vertex of a %d-dimensional parallelotope', n)
        return torch.linalg.solve(self.__directions, -self.__offset[n:])

    def extremal_vertices(self) -> torch.Tensor:
        r""" Compute the vertices sharing an edge with the base vertex

        The :math:`i`-th extremal vertex solves :math:`D v_i = h_i` where :math:`h_i` is
        :math:`-c_{n+1:2n}` with its :math:`i`-th entry replaced by :math:`c_i`.

        Returns:
            torch.Tensor: extremal vertices, one per row in axis order, shape [n, n]
        """
        D, c = self.__directions, self.__offset
        n = self.dimension
        # one right-hand side per column, each a fresh copy of the base one
        H = (-c[n:]).unsqueeze(-1).repeat(1, n)
        idx = torch.arange(n, device=self.device)
        H[idx, idx] = c[:n]
        logger.debug('solving for the %d extremal vertices of a parallelotope', n)
        return torch.linalg.solve(D, H).T

    def center(self) -> torch.Tensor:
        r""" Compute the center

        With base vertex :math:`q` and extremal vertices :math:`v_i`,

        .. math::

            c = q + \sum_{i=1}^n \frac{v_i - q}{2} = q \left(1 - \frac{n}{2}\right) + \frac{1}{2} \sum_{i=1}^n v_i

        Returns:
            torch.Tensor: center, shape [n]
        """
        n = self.dimension
        q = self.base_vertex()
        E = self.extremal_vertices()
        return q*(1 - n/2) + E.sum(0)/2

    def genmat(self) -> torch.Tensor:
        r""" Compute the generator matrix, G[:, i] = (v_i - q)/2

        Returns:
            torch.Tensor: generators as columns in axis order, shape [n, n]
        """
        E = self.extremal_vertices()
        q = self.base_vertex()
        return (E - q).T/2

    def generators(self):
        '''
        The generators of a parallelotope, computed when iterated
        return <ParallelotopeGenerators>, iterable of <torch.Tensor>
        '''
        return ParallelotopeGenerators(self)

    def constraints_list(self) -> list:
        '''
        Constraints of a parallelotope, D_i x <= c_i for every i, then -D_i x <= c_{n+i}
        return <list> of <LinearConstraint>, length 2n
        '''
        D, c = self.__directions, self.__offset
        n = self.dimension
        return [LinearConstraint(D[i], c[i]) for i in range(n)] \
            + [LinearConstraint(-D[i], c[n+i]) for i in range(n)]

    def to_zonotope(self):
        '''
        Generator representation of a parallelotope
        return <zonotope>
        '''
        return lr.zonotope(torch.vstack((self.center(), self.genmat().T)))

    def support_vector(self, d) -> torch.Tensor:
        """ Support vector, computed from the generator representation

        The zero direction gives the center.
        """
        d = self._as_vector(d)
        self._check_vector(d, 'direction')
        return self.to_zonotope().support_vector(d)

    def membership(self, x) -> bool:
        """ Membership of a point, checked against the constraints

        Each constraint is relaxed by the rounding error of a solve with the directions matrix,
        so the vertices computed by :meth:`base_vertex` and :meth:`extremal_vertices` are members.
        """
        x = self._as_vector(x)
        self._check_vector(x, 'point')
        D, c = self.__directions, self.__offset
        n = self.dimension
        Dx = D@x
        eps = torch.finfo(self.dtype).eps**0.5
        tol = eps*(abs(D)@abs(x))
        return bool(torch.all(Dx <= c[:n] + tol + eps*abs(c[:n])) and torch.all(-Dx <= c[n:] + tol + eps*abs(c[n:])))

    def __repr__(self):
        return f'HParallelotope(\n   directions={self.__directions!r},\n   offset={self.__offset!r}\n   )'


class ParallelotopeGenerators:
    '''
    Restartable iterable over the generators of a parallelotope in axis order
    '''
    def __init__(self, P: HParallelotope):
        self.__P = P

    def __len__(self) -> int:
        return self.__P.dimension

    def __iter__(self):
        G = self.__P.genmat()
        for i in range(G.shape[1]):
            yield G[:, i]
