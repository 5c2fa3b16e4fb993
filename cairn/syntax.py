"""
The set of tree-nodes in simple form.
Some front-end (a parser, a builder, a test) calls these constructors bottom-up.
Nodes are not mutated after construction, so sharing one is as good as copying it.
"""
from typing import Sequence

class Element:
	""" Any expression-node. The evaluator dispatches on the concrete class. """
	def __eq__(self, other):
		return type(self) is type(other) and self._key() == other._key()
	def __hash__(self): return hash((type(self), self._key()))
	def _key(self) -> tuple: raise NotImplementedError(type(self))

class Variable(Element):
	def __init__(self, name:str):
		assert isinstance(name, str), name
		self.name = name
	def _key(self): return self.name,
	def __repr__(self): return "<var:%s>"%self.name

class Bare(Element):
	""" A literal word: a string value, or the name of a command at a call site. """
	def __init__(self, text:str):
		assert isinstance(text, str), text
		self.text = text
	def _key(self): return self.text,
	def __repr__(self): return "<bare:%s>"%self.text

class Number(Element):
	def __init__(self, value:int):
		assert isinstance(value, int) and not isinstance(value, bool), value
		self.value = value
	def _key(self): return self.value,
	def __repr__(self): return "<num:%d>"%self.value

class Set(Element):
	""" Bind the value of `expr` to `name` in the innermost activation record. """
	def __init__(self, name:str, expr:Element):
		assert isinstance(name, str), name
		assert isinstance(expr, Element), expr
		self.name, self.expr = name, expr
	def _key(self): return self.name, self.expr
	def __repr__(self): return "<set %s = %r>"%(self.name, self.expr)

class Block(Element):
	"""
	A function literal. Evaluating one makes a closure; it does not run the commands.
	Calling that closure runs the commands in order; the last one gives the result.
	Duplicate parameter names are the front-end's problem.
	"""
	params: tuple[str, ...]
	commands: tuple[Element, ...]

	def __init__(self, params:Sequence[str]=(), commands:Sequence[Element]=()):
		assert all(isinstance(p, str) for p in params), params
		assert all(isinstance(c, Element) for c in commands), commands
		self.params = tuple(params)
		self.commands = tuple(commands)
	def _key(self): return self.params, self.commands
	def __repr__(self): return "<block |%s| %r>"%(' '.join(self.params), list(self.commands))

class Call(Element):
	""" The first element gives the callee; the rest are the arguments. """
	elements: tuple[Element, ...]

	def __init__(self, elements:Sequence[Element]):
		assert len(elements), "An empty call should not get past the front-end."
		assert all(isinstance(e, Element) for e in elements), elements
		self.elements = tuple(elements)

	@property
	def callee(self) -> Element: return self.elements[0]
	@property
	def args(self) -> tuple[Element, ...]: return self.elements[1:]

	def _key(self): return self.elements
	def __repr__(self): return "<call %r>"%list(self.elements)
