"""
What can go wrong while evaluating, and how a host hears about it.

Every failure is an exception derived from EvalError. Nothing here is fatal to the process:
a host may catch, inspect, retry, or hand the error to a Report to be shown on the console.
"""
import sys, random
from typing import Any, Optional
from boozetools.support.failureprone import Issue, Severity

class EvalError(Exception):
	"""
	Root of the evaluation-failure taxonomy.
	As an error leaves each closure call, the call appends a breadcrumb to `trace`,
	innermost first, so the host can see how the program got there.
	"""
	def __init__(self, message:str):
		super().__init__(message)
		self.trace = []

	def note_frame(self, block, bindings:dict):
		self.trace.append(Breadcrumb(block, dict(bindings)))

class UnboundVariable(EvalError):
	def __init__(self, name:str):
		super().__init__("There is no variable called %r in scope."%name)
		self.name = name

class ArityMismatch(EvalError):
	def __init__(self, callee:str, need:int, got:int):
		plural = '' if need == 1 else 's'
		super().__init__("%s takes %d argument%s, but got %d instead."%(callee, need, plural, got))
		self.callee, self.need, self.got = callee, need, got

class TypeMismatch(EvalError):
	def __init__(self, callee:str, position:int, need:str, got:Any):
		pattern = "%s expects %s for argument %d, but got %s."
		super().__init__(pattern%(callee, need, position, kind_of(got)))
		self.callee, self.position, self.need, self.got = callee, position, need, got

class NotCallable(EvalError):
	def __init__(self, value:Any):
		super().__init__("Dunno how to call %s."%kind_of(value))
		self.value = value

class SubexpressionFailed(EvalError):
	""" The right-hand side of a `Set` failed. The original error rides along as `cause`. """
	def __init__(self, name:str, cause:EvalError):
		super().__init__("Could not evaluate the value for %r: %s"%(name, cause))
		self.name, self.cause = name, cause
		self.trace = list(cause.trace)

	def root_cause(self) -> EvalError:
		it = self.cause
		while isinstance(it, SubexpressionFailed): it = it.cause
		return it

class StackOverflow(EvalError):
	def __init__(self, depth:int):
		super().__init__("Calls nested deeper than %d activation records."%depth)
		self.depth = depth

class Breadcrumb:
	""" One closure call that an error passed through on its way out. """
	def __init__(self, block, bindings:dict):
		self.block, self.bindings = block, bindings
	def __str__(self):
		bind_text = ', '.join("%s:%s" % (k, kind_of(v)) for k, v in self.bindings.items())
		return "in block |%s| with %s"%(' '.join(self.block.params), bind_text or "no bindings")

def kind_of(value:Any) -> str:
	""" The user-facing name for the run-time kind of a value. """
	if isinstance(value, bool): return "a flag"
	if isinstance(value, int): return "an integer"
	if isinstance(value, str): return "a string"
	if value is None: return "nothing"
	return getattr(value, "kind", type(value).__name__)

###############################################################################

class TooManyIssues(Exception):
	pass

def _outburst():
	particle = ["Oh, ", "Well, ", "Aw, ", "", ""]
	minced_oaths = ['Ack', 'Blargh', 'Crud', 'Curses', 'Drat', 'Fiddlesticks', 'Good Grief', 'Nuts', 'Rats']
	resignations = ['I am undone.', 'I cannot continue.', 'I need to ask for help.']
	return "%s%s! %s"%tuple(map(random.choice, (particle, minced_oaths, resignations)))

class Report:
	""" Collects the issues a host run turns up, and does the talking to stderr. """
	_issues : list[Issue]

	def __init__(self, *, verbose:int=0, max_issues=3):
		self._verbose = verbose or 0   # Because None is incomparable.
		self._issues = []
		self._traces = []
		self._max_issues = max_issues

	def ok(self): return not self._issues
	def sick(self): return bool(self._issues)

	@property
	def issues(self) -> list[Issue]: return list(self._issues)

	def issue(self, it:Issue, trace=()):
		self._issues.append(it)
		self._traces.append(list(trace))
		if len(self._issues) == self._max_issues:
			raise TooManyIssues(self)

	def reset(self):
		self._issues.clear()
		self._traces.clear()

	def info(self, *args):
		if self._verbose:
			print(*args, file=sys.stderr)

	def evaluation_failed(self, ex:EvalError, site:Optional[Any]=None):
		description = str(ex) if site is None else "%s\n  while evaluating %r"%(ex, site)
		# No evidence: this core never sees source text, so there is nothing to excerpt.
		self.issue(Issue("evaluation", Severity.ERROR, description, {}), ex.trace)

	def complain_to_console(self):
		""" Emit all the issues to the console. """
		if not self._issues: return
		print("*"*60, file=sys.stderr)
		print(_outburst(), file=sys.stderr)
		for issue, trace in zip(self._issues, self._traces):
			print("  -"*20, file=sys.stderr)
			issue.emit(None)
			for crumb in trace:
				print("    "+str(crumb), file=sys.stderr)
		sys.stderr.flush()

	def assert_no_issues(self, message):
		""" Does what it says on the tin """
		if self._issues:
			self.complain_to_console()
			raise AssertionError(_outburst()+" "+message)
