"""
Build the built-in command table.

A built-in is any Python function with a fixed number of positional parameters.
Its signature supplies the arity and its annotations supply the argument kinds,
so a host can register more of them without touching call dispatch.
"""
import inspect
from typing import Any, Callable, Mapping, Optional
from .diagnostics import ArityMismatch, TypeMismatch
from .stacking import Scope
from .tree_walker.types import ARGS, VALUE, NOTHING
from .tree_walker.values import Function

_FIXED = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)

KIND_NAMES = {int: "an integer", str: "a string"}

def _expected(annotation):
	if annotation in (inspect.Parameter.empty, Any): return None
	assert isinstance(annotation, type), annotation
	return annotation

def _conforms(value, expected:Optional[type]) -> bool:
	if expected is None: return True
	if expected is int and isinstance(value, bool): return False
	return isinstance(value, expected)

class Primitive(Function):
	""" All parameters to primitives are strict: the call site has already evaluated them. """
	kind = "a built-in"

	def __init__(self, fn:Callable, name:Optional[str]=None):
		params = list(inspect.signature(fn).parameters.values())
		assert all(p.kind in _FIXED for p in params), "Built-ins take a fixed number of arguments."
		self._fn = fn
		self.name = name or fn.__name__
		self.expects = tuple(_expected(p.annotation) for p in params)

	@property
	def arity(self) -> int: return len(self.expects)

	def __repr__(self): return "<built-in %s/%d>"%(self.name, self.arity)

	def apply(self, args:ARGS, scope:Scope) -> VALUE:
		if len(args) != self.arity:
			raise ArityMismatch(self.name, self.arity, len(args))
		for position, (need, got) in enumerate(zip(self.expects, args), 1):
			if not _conforms(got, need):
				need_text = KIND_NAMES.get(need) or getattr(need, "kind", need.__name__)
				raise TypeMismatch(self.name, position, need_text, got)
		result = self._fn(*args)
		return NOTHING if result is None else result

###############################################################################

def add(a:int, b:int) -> int: return a + b

BUILTINS : dict[str, Callable] = {
	"add": add,
}

def install_builtins(scope:Scope, table:Optional[Mapping[str, Callable]]=None):
	""" Register a table of built-ins (by default, the standard one) in the scope's current record. """
	for name, fn in (BUILTINS if table is None else table).items():
		scope.add_command(name, fn if isinstance(fn, Primitive) else Primitive(fn, name))
