from .decompose import decompose
