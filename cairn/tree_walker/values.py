"""
This module defines the specialized value-types that the tree-walker operates in terms of.
Basic primitive values play themselves, but special things like closures need more help.
"""
from abc import abstractmethod
from types import MappingProxyType
from .. import syntax
from ..stacking import Scope
from ..diagnostics import EvalError, ArityMismatch, StackOverflow
from .types import CairnValue, ARGS, CAPTURED, VALUE
from .evaluator import eval_sequence

class Function(CairnValue):
	""" A run-time object that can be applied with arguments. """
	kind = "a function"
	@abstractmethod
	def apply(self, args:ARGS, scope:Scope) -> VALUE: pass

class Closure(Function):
	"""
	The run-time manifestation of a block literal: the block plus a snapshot
	of the values its free variables held when the literal was evaluated.
	The snapshot is all it keeps. It holds no reference into the scope stack,
	so rebinding an outer variable later does not change what the closure sees.
	"""
	kind = "a block"
	block: syntax.Block
	captured: CAPTURED

	def __init__(self, block:syntax.Block, captured:CAPTURED):
		self.block = block
		self.captured = MappingProxyType(dict(captured))

	def __repr__(self):
		return "<closure |%s| over %s>"%(' '.join(self.block.params), sorted(self.captured))

	def apply(self, args:ARGS, scope:Scope) -> VALUE:
		block = self.block
		if len(args) != len(block.params):
			raise ArityMismatch("This block", len(block.params), len(args))
		if scope.depth >= scope.max_depth:
			raise StackOverflow(scope.max_depth)
		scope.enter_record()
		try:
			# Captures go in first so that a parameter of the same name wins.
			for name, value in self.captured.items():
				scope.add_variable(name, value)
			for param, arg in zip(block.params, args):
				scope.add_variable(param, arg)
			return eval_sequence(block.commands, scope)
		except EvalError as ex:
			ex.note_frame(block, scope.top.variables)
			raise
		except RecursionError as ex:
			# Python ran out of stack before max_depth did.
			raise StackOverflow(scope.depth) from ex
		finally:
			scope.exit_record()

###############################################################################

EXTERNAL_PLACEHOLDER = "Ran an external command"

def no_external(name:str, args:ARGS) -> VALUE:
	"""
	What happens to a command nobody registered, when the host supplies no resolver.
	Nothing runs; the call site just gets a fixed placeholder.
	"""
	return EXTERNAL_PLACEHOLDER
