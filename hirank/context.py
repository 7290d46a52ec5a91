"""
The ordered context of the bidirectional algorithm.

A Context is an immutable sequence of entries. Order means dependency:
an entry may only mention what appears to its left. Every operation that
looks like a mutation returns a new Context, so a caller further up the
derivation can keep using the one it had.
"""
from dataclasses import dataclass
from typing import Iterable, Optional, Union
from .algebra import (
	Type, TypeWalker, TypeVariable, ExistentialVariable, FunctionType, UniversalType,
)

@dataclass(frozen=True)
class ScopeVariable:
	""" A universally-bound type variable in scope: a """
	name: str

@dataclass(frozen=True)
class TypedBinding:
	""" A term variable and its type: x : A """
	term_name: str
	type: Type

@dataclass(frozen=True)
class UnsolvedExistential:
	name: str

@dataclass(frozen=True)
class SolvedExistential:
	name: str
	type: Type

@dataclass(frozen=True)
class Marker:
	""" Scope boundary for the existential of the same name """
	name: str

Entry = Union[ScopeVariable, TypedBinding, UnsolvedExistential, SolvedExistential, Marker]

class Context:
	_entries: tuple[Entry, ...]

	def __init__(self, entries:Iterable[Entry]=()):
		self._entries = tuple(entries)

	@staticmethod
	def empty() -> "Context": return Context()

	def __len__(self): return len(self._entries)
	def __iter__(self): return iter(self._entries)
	def __getitem__(self, index): return self._entries[index]
	def __eq__(self, other): return isinstance(other, Context) and self._entries == other._entries
	def __hash__(self): return hash(self._entries)
	def __repr__(self): return "<Context %s>"%render_context(self)

	def lookup(self, term_name:str) -> Optional[Type]:
		# Innermost binding wins, so scan from the right.
		for entry in reversed(self._entries):
			if isinstance(entry, TypedBinding) and entry.term_name == term_name:
				return entry.type

	def find_solved(self, name:str) -> Optional[Type]:
		for entry in self._entries:
			if isinstance(entry, SolvedExistential) and entry.name == name:
				return entry.type

	def has(self, entry:Entry) -> bool:
		return entry in self._entries

	def index_of(self, entry:Entry) -> int:
		return self._entries.index(entry)

	def push(self, *entries:Entry) -> "Context":
		return Context(self._entries + entries)

	def replace(self, old:Entry, new:Iterable[Entry]) -> "Context":
		try: index = self._entries.index(old)
		except ValueError: return self
		return Context(self._entries[:index] + tuple(new) + self._entries[index+1:])

	def split(self, entry:Entry) -> tuple["Context", "Context"]:
		"""
		Left: everything before the entry. Right: the entry and everything after.
		Equal entries can recur (nested lambdas binding the same name at the same type);
		the latest one belongs to the innermost scope, which is the one being closed.
		"""
		for index in reversed(range(len(self._entries))):
			if self._entries[index] == entry:
				return Context(self._entries[:index]), Context(self._entries[index:])
		raise ValueError(entry)

	def resolve(self, typ:Type) -> Type:
		""" Context application: [Γ]A """
		return Resolution(self).visit(typ)

	def well_formed(self, typ:Type) -> bool:
		return WellFormed().visit(typ, self)

class Resolution(TypeWalker):
	def __init__(self, ctx:Context):
		self.ctx = ctx
	def visit_IntType(self, t): return t
	def visit_StringType(self, t): return t
	def visit_TypeVariable(self, t): return t
	def visit_ExistentialVariable(self, t:ExistentialVariable):
		solution = self.ctx.find_solved(t.name)
		return t if solution is None else self.visit(solution)
	def visit_FunctionType(self, t:FunctionType):
		return FunctionType(self.visit(t.argument), self.visit(t.result))
	def visit_UniversalType(self, t:UniversalType):
		return UniversalType(t.bound_name, self.visit(t.body))

class WellFormed(TypeWalker):
	def visit_IntType(self, t, ctx): return True
	def visit_StringType(self, t, ctx): return True
	def visit_TypeVariable(self, t:TypeVariable, ctx:Context):
		return ctx.has(ScopeVariable(t.name))
	def visit_ExistentialVariable(self, t:ExistentialVariable, ctx:Context):
		return ctx.has(UnsolvedExistential(t.name)) or ctx.find_solved(t.name) is not None
	def visit_FunctionType(self, t:FunctionType, ctx:Context):
		return self.visit(t.argument, ctx) and self.visit(t.result, ctx)
	def visit_UniversalType(self, t:UniversalType, ctx:Context):
		return self.visit(t.body, ctx.push(ScopeVariable(t.bound_name)))

def well_formed(typ:Type, ctx:Context) -> bool:
	return ctx.well_formed(typ)

def render_entry(entry:Entry) -> str:
	if isinstance(entry, ScopeVariable): return entry.name
	if isinstance(entry, TypedBinding): return "%s : %s"%(entry.term_name, entry.type)
	if isinstance(entry, UnsolvedExistential): return "^"+entry.name
	if isinstance(entry, SolvedExistential): return "^%s = %s"%(entry.name, entry.type)
	if isinstance(entry, Marker): return "|>"+entry.name
	return repr(entry)

def render_context(ctx:Context) -> str:
	return "[%s]"%", ".join(map(render_entry, ctx))
