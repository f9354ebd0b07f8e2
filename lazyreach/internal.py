"""
A collection of internal flags for lazyreach.

.. data:: __debug_extra__

    A boolean flag to enable extra debugging checks which may require additional computation.
    Default is True (to perform extra checks). Disable this to improve performance.
    Currently this covers the scalar type agreement of the operands of a Cartesian product.

"""
__debug_extra__ = True
