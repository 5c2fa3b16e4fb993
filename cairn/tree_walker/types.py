"""
This module aims to express an interface agreement
between the evaluator and various kinds of data.
"""

from abc import ABC
from typing import Mapping, Sequence, Union


NATIVE_DATA = Union[int, str]

class CairnValue(ABC):
	""" Root for classes that implement specialized run-time data structures """
	kind = "a value"

class Nothing(CairnValue):
	""" The unit value: what `Set` and an empty block give back. """
	kind = "nothing"
	def __repr__(self): return "Nothing"

NOTHING = Nothing()

VALUE = Union[NATIVE_DATA, CairnValue]
ARGS = Sequence[VALUE]
CAPTURED = Mapping[str, VALUE]
