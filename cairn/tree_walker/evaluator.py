"""
The generic machinery that everything needs,
without the specific methods corresponding to particular syntax.
"""

from typing import Iterable
from .. import syntax
from ..stacking import Scope
from .types import VALUE, NOTHING


def evaluate(expr:syntax.Element, scope:Scope) -> VALUE:
	assert isinstance(scope, Scope), scope
	try: fn = EVALUATE[type(expr)]
	except KeyError: raise NotImplementedError(type(expr), expr)
	return fn(expr, scope)

def eval_sequence(commands:Iterable[syntax.Element], scope:Scope) -> VALUE:
	""" Run commands in order; the last one's value is the result. """
	result = NOTHING
	for cmd in commands:
		result = evaluate(cmd, scope)
	return result

EVALUATE = {}

def attach_evaluation_methods(python_scope):
	for _k, _v in list(python_scope.items()):
		if _k.startswith("_eval_"):
			_t = _v.__annotations__["expr"]
			assert isinstance(_t, type), (_k, _t)
			EVALUATE[_t] = _v
