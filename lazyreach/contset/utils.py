"""
Utilities for the construction of continuous sets
Author: lazyreach developers
"""
import torch
import lazyreach as lr

def infer_dtype(*values):
    '''
    Data type of a set built from the given values
    Only floating tensors carry a data type. Python scalars, lists and integer tensors
    take the package default, so a set built from lists matches DEFAULT_OPTS.DTYPE.
    return torch.float or torch.double
    '''
    dtype = None
    for v in values:
        if isinstance(v, torch.Tensor) and v.dtype.is_floating_point:
            dtype = v.dtype if dtype is None else torch.promote_types(dtype, v.dtype)
    if dtype is None:
        dtype = lr.DEFAULT_OPTS.DTYPE
    return dtype
