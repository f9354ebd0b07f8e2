"""
A collection of internal properties for lazyreach.

.. data:: __version__

    Version of the lazyreach package. This value is automatically propagated from here to
    the package's setup.py file.

.. data:: __logo__

    A fun little logo for lazyreach.

"""
__version__ = "0.1.0"
__logo__ = """
*** LAZY-REACH ***
  ___     ___
 |   | x |   | x ...
 |___|   |___|
"""
