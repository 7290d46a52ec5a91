"""
Instantiation: solving an existential against a type, from either side.

	Γ ⊢ â <=: A ⊣ Δ    (left: â must become a subtype of A)
	Γ ⊢ A <=: â ⊣ Δ    (right: â must become a supertype of A)

The caller has already made sure â does not occur in A.
"""
from typing import Optional
from .algebra import (
	Type, ExistentialVariable, FunctionType, UniversalType, is_monotype, substitute,
)
from .context import Context, ScopeVariable, UnsolvedExistential, SolvedExistential, Marker, render_context
from .diagnostics import Report, InvalidInstantiation
from .fresh import NameSupply

class Instantiation:
	def __init__(self, names:NameSupply, report:Report):
		self._names = names
		self._report = report

	def left(self, name:str, typ:Type, ctx:Context) -> Context:
		""" Γ ⊢ â <=: A ⊣ Δ """
		with self._report.judging("instantiate-left", "^%s <=: %s"%(name, typ), render_context(ctx)):
			solved = self._solve(name, typ, ctx)
			if solved is not None:
				return solved
			if isinstance(typ, ExistentialVariable):
				return self._reach(name, typ.name, ctx)
			if isinstance(typ, FunctionType):
				# InstLArr: contravariant in the argument.
				a1, a2, gamma = self.articulate(name, ctx)
				theta = self.right(typ.argument, a1, gamma)
				return self.left(a2, theta.resolve(typ.result), theta)
			if isinstance(typ, UniversalType):
				# InstLAllR
				beta = ScopeVariable(typ.bound_name)
				delta, _ = self.left(name, typ.body, ctx.push(beta)).split(beta)
				return delta
			raise InvalidInstantiation(ExistentialVariable(name), typ)

	def right(self, typ:Type, name:str, ctx:Context) -> Context:
		""" Γ ⊢ A <=: â ⊣ Δ """
		with self._report.judging("instantiate-right", "%s <=: ^%s"%(typ, name), render_context(ctx)):
			solved = self._solve(name, typ, ctx)
			if solved is not None:
				return solved
			if isinstance(typ, ExistentialVariable):
				return self._reach(name, typ.name, ctx)
			if isinstance(typ, FunctionType):
				# InstRArr
				a1, a2, gamma = self.articulate(name, ctx)
				theta = self.left(a1, typ.argument, gamma)
				return self.right(theta.resolve(typ.result), a2, theta)
			if isinstance(typ, UniversalType):
				# InstRAllL: the bound variable becomes a fresh existential behind a marker.
				beta = self._names.fresh()
				marker = Marker(beta)
				gamma = ctx.push(marker, UnsolvedExistential(beta))
				body = substitute(ExistentialVariable(beta), typ.bound_name, typ.body)
				delta, _ = self.right(body, name, gamma).split(marker)
				return delta
			raise InvalidInstantiation(typ, ExistentialVariable(name))

	def _solve(self, name:str, typ:Type, ctx:Context) -> Optional[Context]:
		"""
		InstLSolve / InstRSolve: a monotype that makes sense to the left of â
		can simply become its solution. Returns None if this rule does not apply.
		"""
		hole = UnsolvedExistential(name)
		if not ctx.has(hole):
			raise InvalidInstantiation(ExistentialVariable(name), typ)
		if not is_monotype(typ):
			return None
		prefix, _ = ctx.split(hole)
		if not prefix.well_formed(typ):
			return None
		return ctx.replace(hole, [SolvedExistential(name, typ)])

	def _reach(self, alpha:str, beta:str, ctx:Context) -> Context:
		""" InstLReach / InstRReach: the later existential gets solved to the earlier one. """
		alpha_hole, beta_hole = UnsolvedExistential(alpha), UnsolvedExistential(beta)
		if alpha == beta:
			return ctx
		if not ctx.has(beta_hole):
			raise InvalidInstantiation(ExistentialVariable(alpha), ExistentialVariable(beta))
		if ctx.index_of(alpha_hole) < ctx.index_of(beta_hole):
			return ctx.replace(beta_hole, [SolvedExistential(beta, ExistentialVariable(alpha))])
		else:
			return ctx.replace(alpha_hole, [SolvedExistential(alpha, ExistentialVariable(beta))])

	def articulate(self, name:str, ctx:Context) -> tuple[str, str, Context]:
		"""
		Γ[â] becomes Γ[â2, â1, â = â1 -> â2].
		Also used by application-synthesis when the function's type is an existential.
		"""
		a1, a2 = self._names.several(2)
		arrow = FunctionType(ExistentialVariable(a1), ExistentialVariable(a2))
		gamma = ctx.replace(UnsolvedExistential(name), [
			UnsolvedExistential(a2),
			UnsolvedExistential(a1),
			SolvedExistential(name, arrow),
		])
		return a1, a2, gamma
