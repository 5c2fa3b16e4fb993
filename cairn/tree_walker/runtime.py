"""
One evaluation method per kind of node, plus call dispatch and closure capture.
Importing this module is what fills in the dispatch table in `evaluator`.
"""
from .. import syntax
from ..diagnostics import EvalError, UnboundVariable, NotCallable, SubexpressionFailed
from ..resolution import capture_list
from ..stacking import Scope
from .types import ARGS, VALUE, NOTHING
from .evaluator import evaluate, attach_evaluation_methods
from .values import Function, Closure, no_external

###############################################################################

def _eval_variable(expr:syntax.Variable, scope:Scope):
	try: return scope.fetch_variable(expr.name)
	except KeyError: raise UnboundVariable(expr.name) from None

def _eval_number(expr:syntax.Number, scope:Scope):
	return expr.value

def _eval_bare(expr:syntax.Bare, scope:Scope):
	# Just a string, until some call site uses it as a command name.
	return expr.text

def _eval_set(expr:syntax.Set, scope:Scope):
	try: value = evaluate(expr.expr, scope)
	except EvalError as ex: raise SubexpressionFailed(expr.name, ex) from ex
	scope.add_variable(expr.name, value)
	return NOTHING

def _eval_block(expr:syntax.Block, scope:Scope):
	return capture_block(expr, scope)

def _eval_call(expr:syntax.Call, scope:Scope):
	callee = evaluate(expr.callee, scope)
	if isinstance(callee, Function):
		return callee.apply(_argument_values(expr, scope), scope)
	if isinstance(callee, str):
		return call_command(callee, _argument_values(expr, scope), scope)
	raise NotCallable(callee)

attach_evaluation_methods(globals())

###############################################################################

def _argument_values(expr:syntax.Call, scope:Scope) -> list[VALUE]:
	# Strictly left to right; the side effects are observable.
	return [evaluate(a, scope) for a in expr.args]

def call_command(name:str, args:ARGS, scope:Scope) -> VALUE:
	"""
	A built-in if the scope knows one by this name, otherwise an external command.
	External commands go to the host's resolver, if it supplied one.
	"""
	command = scope.get_command(name)
	if command is not None:
		return command.apply(args, scope)
	external = scope.external or no_external
	result = external(name, tuple(args))
	return NOTHING if result is None else result

def capture_block(block:syntax.Block, scope:Scope) -> Closure:
	"""
	Snapshot the current value of each free variable of the block.
	All or nothing: one unresolvable name and there is no closure at all.
	"""
	captured = {}
	for name in capture_list(block):
		try: captured[name] = scope.fetch_variable(name)
		except KeyError: raise UnboundVariable(name) from None
	return Closure(block, captured)
