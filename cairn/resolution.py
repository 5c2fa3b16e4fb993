"""
Free-variable analysis.

A closure snapshots exactly the names its block uses but does not bind for itself.
Binding is sequential: a `Set` counts as known only for the siblings after it,
never for its own right-hand side, and never for anything before it.
So the "known" list gets threaded through each command sequence as a fold,
rather than each command being analysed on its own.
"""
from typing import Optional
from boozetools.support.foundation import Visitor
from . import syntax

class FreeVariables(Visitor):
	"""
	Each visit returns the free names of a node in order of occurrence (duplicates and all)
	and may extend the `known` list in place with names bound along the way.
	"""

	def visit_Variable(self, it:syntax.Variable, known:list[str]) -> list[str]:
		return [] if it.name in known else [it.name]

	def visit_Number(self, it:syntax.Number, known:list[str]) -> list[str]: return []
	def visit_Bare(self, it:syntax.Bare, known:list[str]) -> list[str]: return []

	def visit_Set(self, it:syntax.Set, known:list[str]) -> list[str]:
		free = self.visit(it.expr, known)
		known.append(it.name)
		return free

	def visit_Block(self, it:syntax.Block, known:list[str]) -> list[str]:
		# Parameters and inner bindings stay inside; only the free names come out.
		inner = known + list(it.params)
		return self.fold(it.commands, inner)

	def visit_Call(self, it:syntax.Call, known:list[str]) -> list[str]:
		return self.fold(it.elements, known)

	def fold(self, elements, known:list[str]) -> list[str]:
		free = []
		for elt in elements:
			free.extend(self.visit(elt, known))
		return free

_ANALYZER = FreeVariables()

def free_variables(node:syntax.Element, known:Optional[list[str]]=None) -> list[str]:
	""" If you pass in `known`, expect it to grow by whatever `node` binds. """
	return _ANALYZER.visit(node, [] if known is None else known)

def capture_list(block:syntax.Block) -> list[str]:
	""" The names a closure over this block must snapshot, first occurrence first. """
	return list(dict.fromkeys(free_variables(block)))
