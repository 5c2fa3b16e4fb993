"""
Activation records and the stack of them.

The stack is shaped exactly like the chain of calls in progress,
so looking a name up from the top down gives dynamic scope.
Closures get their lexical feel elsewhere, by snapshot (see `resolution` and `tree_walker.runtime`).
"""
from typing import Any, Callable, Optional

DEFAULT_MAX_DEPTH = 128

class ActivationRecord:
	""" Variable and command bindings local to one call (or to the root). """
	variables: dict[str, Any]
	commands: dict[str, Any]

	def __init__(self):
		self.variables = {}
		self.commands = {}

	def __repr__(self):
		return "<record vars=%s cmds=%s>"%(sorted(self.variables), sorted(self.commands))

class Scope:
	"""
	Never empty: the root record stays put for the life of the scope.
	None of these operations can fail. `exit_record` on the bare root quietly does nothing,
	which keeps frame clean-up idempotent along error paths.

	`max_depth` limits how many records may sit above the root; the call path enforces it.
	`external` is the host's hook for commands that are neither closures nor built-ins.
	"""
	records: list[ActivationRecord]

	def __init__(self, *, max_depth:int=DEFAULT_MAX_DEPTH, external:Optional[Callable]=None):
		assert max_depth >= 0, max_depth
		self.records = [ActivationRecord()]
		self.max_depth = max_depth
		self.external = external

	@property
	def depth(self) -> int:
		""" How many records sit above the root. """
		return len(self.records) - 1

	@property
	def top(self) -> ActivationRecord: return self.records[-1]

	def fetch_variable(self, name:str) -> Any:
		""" Innermost binding first. Raises KeyError if no record binds the name. """
		for rec in reversed(self.records):
			if name in rec.variables:
				return rec.variables[name]
		raise KeyError(name)

	def get_variable(self, name:str) -> Optional[Any]:
		try: return self.fetch_variable(name)
		except KeyError: return None

	def has_variable(self, name:str) -> bool:
		return any(name in rec.variables for rec in self.records)

	def get_command(self, name:str) -> Optional[Any]:
		for rec in reversed(self.records):
			if name in rec.commands:
				return rec.commands[name]
		return None

	def add_variable(self, name:str, value:Any):
		self.top.variables[name] = value

	def add_command(self, name:str, command:Any):
		self.top.commands[name] = command

	def enter_record(self):
		self.records.append(ActivationRecord())

	def exit_record(self):
		if len(self.records) > 1:
			self.records.pop()
