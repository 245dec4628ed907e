"""Concrete rings for tests and demonstrations."""

from .algebra import TableAlgebra
from .boolean import BooleanRing
from .integers import Integers, IntegersMod, NaturalNumbers
from .matrix import MatrixRing

__all__ = [
    "Integers",
    "IntegersMod",
    "NaturalNumbers",
    "BooleanRing",
    "MatrixRing",
    "TableAlgebra",
]
