"""Matrix decomposition models that store their second factor in
``components_``."""
from .base import AbstractDecompositionModel
from .svd import IncrementalSVD, TruncatedSVD

__all__ = ["AbstractDecompositionModel",
           "IncrementalSVD",
           "TruncatedSVD"]
