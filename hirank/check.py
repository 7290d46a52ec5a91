"""
Bidirectional type checking with higher-rank polymorphism.

Two judgments call each other:

	Γ ⊢ e => A ⊣ Δ     synthesis: work out the type of e
	Γ ⊢ e <= A ⊣ Δ     checking: confirm e has type A

plus application synthesis, Γ ⊢ A • e =>=> C ⊣ Δ, which works out what
comes of applying a function of type A to the argument e.

Checking falls back on subtyping where no more specific rule applies,
and that is where existentials get solved.
"""
from typing import Optional
from boozetools.support.foundation import Visitor
from . import syntax
from .algebra import (
	Type, IntType, StringType, ExistentialVariable, FunctionType, UniversalType,
	substitute, free_existentials,
)
from .context import Context, ScopeVariable, TypedBinding, UnsolvedExistential, render_context
from .diagnostics import Report, UnknownVariable, InvalidType, UnknownExpression, InvalidApplication
from .fresh import NameSupply
from .subtyping import Subtyping

class TypeChecker(Visitor):
	"""
	One instance per checking run: it owns the name supply,
	so fresh names never leak from one run into the next.
	"""
	def __init__(self, report:Optional[Report]=None):
		self._report = report or Report()
		self._names = NameSupply()
		self._subtyping = Subtyping(self._names, self._report)

	def infer(self, expr:syntax.Expression) -> Type:
		typ, delta = self.synthesize(expr, Context.empty())
		result = delta.resolve(typ)
		self._report.info("Inferred", result)
		unsolved = free_existentials(result)
		if unsolved:
			self._report.info("Left unsolved:", ", ".join(sorted(unsolved)))
		return result

	def subtype(self, a:Type, b:Type, ctx:Context) -> Context:
		return self._subtyping.subtype(a, b, ctx)

	####################################################################
	#  Synthesis: Γ ⊢ e => A ⊣ Δ

	def synthesize(self, expr:syntax.Expression, ctx:Context) -> tuple[Type, Context]:
		if not syntax.is_expression(expr): raise UnknownExpression(expr)
		with self._report.judging("synthesize", _show(expr), render_context(ctx)):
			return self.visit(expr, ctx)

	def visit_IntegerLiteral(self, expr, ctx):
		return IntType(), ctx

	def visit_StringLiteral(self, expr, ctx):
		return StringType(), ctx

	def visit_VariableReference(self, expr:syntax.VariableReference, ctx:Context):
		typ = ctx.lookup(expr.name)
		if typ is None: raise UnknownVariable(expr.name)
		return typ, ctx

	def visit_TypeAnnotation(self, expr:syntax.TypeAnnotation, ctx:Context):
		if not ctx.well_formed(expr.type): raise InvalidType(expr.type)
		return expr.type, self.check(expr.expr, expr.type, ctx)

	def visit_LambdaAbstraction(self, expr:syntax.LambdaAbstraction, ctx:Context):
		alpha, beta = self._names.several(2)
		alpha_type, beta_type = ExistentialVariable(alpha), ExistentialVariable(beta)
		binding = TypedBinding(expr.param_name, alpha_type)
		gamma = ctx.push(UnsolvedExistential(alpha), UnsolvedExistential(beta), binding)
		delta, _ = self.check(expr.body, beta_type, gamma).split(binding)
		return FunctionType(alpha_type, beta_type), delta

	def visit_Application(self, expr:syntax.Application, ctx:Context):
		a, theta = self.synthesize(expr.function, ctx)
		return self.synthesize_application(theta.resolve(a), expr.argument, theta)

	####################################################################
	#  Application: Γ ⊢ A • e =>=> C ⊣ Δ

	def synthesize_application(self, fn_type:Type, arg:syntax.Expression, ctx:Context) -> tuple[Type, Context]:
		with self._report.judging("apply", "%s • %s"%(fn_type, _show(arg)), render_context(ctx)):
			if isinstance(fn_type, UniversalType):
				alpha = self._names.fresh()
				opened = substitute(ExistentialVariable(alpha), fn_type.bound_name, fn_type.body)
				return self.synthesize_application(opened, arg, ctx.push(UnsolvedExistential(alpha)))
			if isinstance(fn_type, ExistentialVariable):
				a1, a2, gamma = self._subtyping.instantiate.articulate(fn_type.name, ctx)
				return ExistentialVariable(a2), self.check(arg, ExistentialVariable(a1), gamma)
			if isinstance(fn_type, FunctionType):
				return fn_type.result, self.check(arg, fn_type.argument, ctx)
			raise InvalidApplication(fn_type)

	####################################################################
	#  Checking: Γ ⊢ e <= A ⊣ Δ

	def check(self, expr:syntax.Expression, typ:Type, ctx:Context) -> Context:
		if not syntax.is_expression(expr): raise UnknownExpression(expr)
		with self._report.judging("check", "%s <= %s"%(_show(expr), typ), render_context(ctx)):
			if isinstance(expr, syntax.IntegerLiteral) and isinstance(typ, IntType):
				return ctx
			if isinstance(expr, syntax.StringLiteral) and isinstance(typ, StringType):
				return ctx
			if isinstance(expr, syntax.LambdaAbstraction) and isinstance(typ, FunctionType):
				binding = TypedBinding(expr.param_name, typ.argument)
				delta, _ = self.check(expr.body, typ.result, ctx.push(binding)).split(binding)
				return delta
			if isinstance(typ, UniversalType):
				alpha = ScopeVariable(typ.bound_name)
				delta, _ = self.check(expr, typ.body, ctx.push(alpha)).split(alpha)
				return delta
			# Sub
			a, theta = self.synthesize(expr, ctx)
			return self.subtype(theta.resolve(a), theta.resolve(typ), theta)

def infer(expr:syntax.Expression, report:Optional[Report]=None) -> Type:
	""" The type of a closed expression, with every solved existential filled in. """
	return TypeChecker(report).infer(expr)

def _show(expr) -> str:
	# Just enough to follow a trace.
	if isinstance(expr, syntax.IntegerLiteral): return str(expr.value)
	if isinstance(expr, syntax.StringLiteral): return repr(expr.value)
	if isinstance(expr, syntax.VariableReference): return expr.name
	if isinstance(expr, syntax.TypeAnnotation): return "(%s : %s)"%(_show(expr.expr), expr.type)
	if isinstance(expr, syntax.LambdaAbstraction): return "(\\%s. %s)"%(expr.param_name, _show(expr.body))
	if isinstance(expr, syntax.Application): return "(%s %s)"%(_show(expr.function), _show(expr.argument))
	return repr(expr)
