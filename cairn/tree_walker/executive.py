"""
The overall control for the run-time, as seen from a host.
"""
from typing import Iterable, Optional
from .. import syntax
from ..diagnostics import Report, EvalError
from ..primitive import install_builtins
from ..stacking import Scope
from .evaluator import evaluate
from .types import VALUE
from . import runtime # NOQA: installs the per-node evaluation methods.

__all__ = ["evaluate", "standard_scope", "run_program"]

def standard_scope(**kwargs) -> Scope:
	""" A fresh root scope with the standard built-ins. Keywords go to `Scope`. """
	scope = Scope(**kwargs)
	install_builtins(scope)
	return scope

def run_program(program:Iterable[syntax.Element], scope:Optional[Scope]=None, report:Optional[Report]=None) -> list[Optional[VALUE]]:
	"""
	Evaluate top-level elements one after another in the same scope.
	A failure goes to the report and leaves `None` in its slot; the rest still run.
	The report may give up with TooManyIssues; that is the host's to catch.
	"""
	scope = standard_scope() if scope is None else scope
	report = Report() if report is None else report
	results = []
	for step, element in enumerate(program):
		report.info("%3d :"%step, element)
		try: result = evaluate(element, scope)
		except EvalError as ex:
			report.evaluation_failed(ex, element)
			result = None
		else:
			report.info("    =>", result)
		results.append(result)
	return results
