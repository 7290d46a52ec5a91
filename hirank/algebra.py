"""
The Algebra of Types
=====================

Types are immutable values with structural equality.
The walkers here are pure: nothing in this module looks at a context.

Design Note:
-------------
Substitution stops at a quantifier that re-binds the target name, and never renames.
That is sound only because every name the checker invents comes from a NameSupply,
so an invented name cannot collide with a name in the user's annotations.
"""
from dataclasses import dataclass
from boozetools.support.foundation import Visitor
from .diagnostics import UnknownType

class Type:
	""" Common base of the closed set of type forms below. """
	def __str__(self): return Render().visit(self)
	def __repr__(self): return "<%s>"%self

@dataclass(frozen=True, repr=False)
class IntType(Type):
	pass

@dataclass(frozen=True, repr=False)
class StringType(Type):
	pass

@dataclass(frozen=True, repr=False)
class TypeVariable(Type):
	name: str

@dataclass(frozen=True, repr=False)
class ExistentialVariable(Type):
	name: str

@dataclass(frozen=True, repr=False)
class FunctionType(Type):
	argument: Type
	result: Type

@dataclass(frozen=True, repr=False)
class UniversalType(Type):
	bound_name: str
	body: Type

TYPES = (IntType, StringType, TypeVariable, ExistentialVariable, FunctionType, UniversalType)

#########################

class TypeWalker(Visitor):
	""" Refuses to visit anything outside the closed set of type forms. """
	def visit(self, typ, *args):
		if not isinstance(typ, TYPES): raise UnknownType(typ)
		return super().visit(typ, *args)

class Substitution(TypeWalker):
	""" [replacement/name]T, for type variables and existentials alike. """
	def __init__(self, replacement:Type, name:str):
		self.replacement, self.name = replacement, name
	def visit_IntType(self, t): return t
	def visit_StringType(self, t): return t
	def visit_TypeVariable(self, t:TypeVariable):
		return self.replacement if t.name == self.name else t
	def visit_ExistentialVariable(self, t:ExistentialVariable):
		return self.replacement if t.name == self.name else t
	def visit_FunctionType(self, t:FunctionType):
		return FunctionType(self.visit(t.argument), self.visit(t.result))
	def visit_UniversalType(self, t:UniversalType):
		# Shadowed: the target is not free in here.
		if t.bound_name == self.name: return t
		return UniversalType(t.bound_name, self.visit(t.body))

def substitute(replacement:Type, name:str, typ:Type) -> Type:
	return Substitution(replacement, name).visit(typ)

class Occurs(TypeWalker):
	""" Does the name occur free? """
	def __init__(self, name:str):
		self.name = name
	def visit_IntType(self, t): return False
	def visit_StringType(self, t): return False
	def visit_TypeVariable(self, t): return t.name == self.name
	def visit_ExistentialVariable(self, t): return t.name == self.name
	def visit_FunctionType(self, t):
		return self.visit(t.argument) or self.visit(t.result)
	def visit_UniversalType(self, t):
		return t.bound_name != self.name and self.visit(t.body)

def occurs(name:str, typ:Type) -> bool:
	return Occurs(name).visit(typ)

class Monotype(TypeWalker):
	def visit_IntType(self, t): return True
	def visit_StringType(self, t): return True
	def visit_TypeVariable(self, t): return True
	def visit_ExistentialVariable(self, t): return True
	def visit_FunctionType(self, t):
		return self.visit(t.argument) and self.visit(t.result)
	def visit_UniversalType(self, t): return False

def is_monotype(typ:Type) -> bool:
	return Monotype().visit(typ)

class Existentials(TypeWalker):
	""" Collect the existential names mentioned in a type. """
	def __init__(self):
		self.seen = set()
	def visit_IntType(self, t): pass
	def visit_StringType(self, t): pass
	def visit_TypeVariable(self, t): pass
	def visit_ExistentialVariable(self, t): self.seen.add(t.name)
	def visit_FunctionType(self, t):
		self.visit(t.argument)
		self.visit(t.result)
	def visit_UniversalType(self, t): self.visit(t.body)

def free_existentials(typ:Type) -> frozenset:
	poll = Existentials()
	poll.visit(typ)
	return frozenset(poll.seen)

#########################

class Render(TypeWalker):
	""" Return a string representation of the term. """
	def visit_IntType(self, t): return "int"
	def visit_StringType(self, t): return "string"
	def visit_TypeVariable(self, t): return t.name
	def visit_ExistentialVariable(self, t): return "^"+t.name
	def visit_FunctionType(self, t:FunctionType):
		arg = self.visit(t.argument)
		if isinstance(t.argument, (FunctionType, UniversalType)):
			arg = "(%s)"%arg
		return "%s -> %s" % (arg, self.visit(t.result))
	def visit_UniversalType(self, t:UniversalType):
		return "forall %s. %s" % (t.bound_name, self.visit(t.body))
