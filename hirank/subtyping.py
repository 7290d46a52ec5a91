"""
The subtyping judgment: Γ ⊢ A <: B ⊣ Δ

Both sides arrive already resolved under Γ, and the rules keep them that way.
Quantifiers get opened here, and whatever a rule opens, it also closes:
the output context is cut back at the entry the rule introduced.
"""
from .algebra import (
	Type, IntType, StringType, TypeVariable, ExistentialVariable,
	FunctionType, UniversalType, TYPES, occurs, substitute,
)
from .context import Context, ScopeVariable, UnsolvedExistential, Marker, render_context
from .diagnostics import Report, SubtypeMismatch, CircularInstantiation, UnknownType
from .fresh import NameSupply
from .instantiation import Instantiation

class Subtyping:
	def __init__(self, names:NameSupply, report:Report):
		self._names = names
		self._report = report
		self.instantiate = Instantiation(names, report)

	def subtype(self, a:Type, b:Type, ctx:Context) -> Context:
		for t in a, b:
			if not isinstance(t, TYPES): raise UnknownType(t)
		with self._report.judging("subtype", "%s <: %s"%(a, b), render_context(ctx)):
			return self._subtype(a, b, ctx)

	def _subtype(self, a:Type, b:Type, ctx:Context) -> Context:
		# Unit
		if isinstance(a, IntType) and isinstance(b, IntType):
			return ctx
		if isinstance(a, StringType) and isinstance(b, StringType):
			return ctx

		# Var
		if isinstance(a, TypeVariable) and isinstance(b, TypeVariable):
			if a.name != b.name: raise SubtypeMismatch(a, b)
			return ctx

		# Exvar, or else one solves to the other.
		if isinstance(a, ExistentialVariable) and isinstance(b, ExistentialVariable):
			if a.name == b.name: return ctx
			return self.instantiate.right(a, b.name, ctx)

		# <:->
		if isinstance(a, FunctionType) and isinstance(b, FunctionType):
			theta = self.subtype(b.argument, a.argument, ctx)
			return self.subtype(theta.resolve(a.result), theta.resolve(b.result), theta)

		# <:∀R must precede <:∀L.
		if isinstance(b, UniversalType):
			alpha = ScopeVariable(b.bound_name)
			delta, _ = self.subtype(a, b.body, ctx.push(alpha)).split(alpha)
			return delta

		# <:∀L
		if isinstance(a, UniversalType):
			name = self._names.fresh()
			marker = Marker(name)
			gamma = ctx.push(marker, UnsolvedExistential(name))
			opened = substitute(ExistentialVariable(name), a.bound_name, a.body)
			delta, _ = self.subtype(opened, b, gamma).split(marker)
			return delta

		# <:InstantiateL
		if isinstance(a, ExistentialVariable):
			if occurs(a.name, b): raise CircularInstantiation(a, b)
			return self.instantiate.left(a.name, b, ctx)

		# <:InstantiateR
		if isinstance(b, ExistentialVariable):
			if occurs(b.name, a): raise CircularInstantiation(b, a)
			return self.instantiate.right(a, b.name, ctx)

		raise SubtypeMismatch(a, b)
