import unittest

from hirank.algebra import IntType, StringType, TypeVariable, ExistentialVariable, FunctionType, UniversalType
from hirank.context import Context, ScopeVariable, UnsolvedExistential, SolvedExistential, Marker
from hirank.diagnostics import Report, InvalidInstantiation
from hirank.fresh import NameSupply
from hirank.instantiation import Instantiation

INT, STRING = IntType(), StringType()
a = TypeVariable("a")

def ex(name): return ExistentialVariable(name)

class InstantiationTests(unittest.TestCase):
	def setUp(self) -> None:
		self.names = NameSupply(prefix="#")
		self.sut = Instantiation(self.names, Report())

	def test_solve_both_directions(self):
		ctx = Context.empty().push(UnsolvedExistential("$1"))
		want = Context.empty().push(SolvedExistential("$1", INT))
		self.assertEqual(want, self.sut.left("$1", INT, ctx))
		self.assertEqual(want, self.sut.right(INT, "$1", ctx))

	def test_solve_keeps_position(self):
		ctx = Context.empty().push(ScopeVariable("a"), UnsolvedExistential("$1"), ScopeVariable("b"))
		out = self.sut.left("$1", a, ctx)
		self.assertEqual(SolvedExistential("$1", a), out[1])
		self.assertEqual(3, len(out))

	def test_solution_must_be_in_scope_before_the_existential(self):
		ctx = Context.empty().push(UnsolvedExistential("$1"), ScopeVariable("a"))
		with self.assertRaises(InvalidInstantiation):
			self.sut.left("$1", a, ctx)

	def test_reach_solves_the_later_existential(self):
		ctx = Context.empty().push(UnsolvedExistential("$1"), UnsolvedExistential("$2"))
		for out in [self.sut.left("$1", ex("$2"), ctx), self.sut.right(ex("$2"), "$1", ctx)]:
			with self.subTest(out):
				self.assertEqual(ex("$1"), out.find_solved("$2"))
				self.assertIsNone(out.find_solved("$1"))

	def test_earlier_existential_is_solved_directly(self):
		ctx = Context.empty().push(UnsolvedExistential("$1"), UnsolvedExistential("$2"))
		out = self.sut.left("$2", ex("$1"), ctx)
		self.assertEqual(ex("$1"), out.find_solved("$2"))

	def test_articulate(self):
		ctx = Context.empty().push(ScopeVariable("a"), UnsolvedExistential("$1"))
		a1, a2, out = self.sut.articulate("$1", ctx)
		self.assertEqual(("#1", "#2"), (a1, a2))
		self.assertEqual([
			ScopeVariable("a"),
			UnsolvedExistential(a2),
			UnsolvedExistential(a1),
			SolvedExistential("$1", FunctionType(ex(a1), ex(a2))),
		], list(out))

	def test_function_left(self):
		# $1 <=: a -> int, where a comes after $1, so articulation is needed.
		ctx = Context.empty().push(UnsolvedExistential("$1"), ScopeVariable("a"))
		with self.assertRaises(InvalidInstantiation):
			self.sut.left("$1", FunctionType(a, INT), ctx)
		ctx = Context.empty().push(UnsolvedExistential("$0"), UnsolvedExistential("$1"))
		out = self.sut.left("$1", FunctionType(ex("$0"), FunctionType(UniversalType("b", TypeVariable("b")), INT)), ctx)
		solution = out.resolve(ex("$1"))
		self.assertIsInstance(solution, FunctionType)
		self.assertEqual(ex("$0"), solution.argument)

	def test_function_right_with_polymorphic_argument(self):
		# (forall b. int) -> int <=: $1 cannot solve directly, so $1 becomes #1 -> #2.
		ctx = Context.empty().push(UnsolvedExistential("$1"))
		out = self.sut.right(FunctionType(UniversalType("b", INT), INT), "$1", ctx)
		self.assertEqual(FunctionType(INT, INT), out.resolve(ex("$1")))
		self.assertFalse(out.has(ScopeVariable("b")))

	def test_no_monotype_is_below_forall_b_b(self):
		ctx = Context.empty().push(UnsolvedExistential("$1"))
		with self.assertRaises(InvalidInstantiation):
			self.sut.right(FunctionType(UniversalType("b", TypeVariable("b")), INT), "$1", ctx)

	def test_quantifier_left_cleans_up_the_scope_variable(self):
		ctx = Context.empty().push(UnsolvedExistential("$1"))
		out = self.sut.left("$1", UniversalType("b", FunctionType(INT, INT)), ctx)
		self.assertEqual(FunctionType(INT, INT), out.resolve(ex("$1")))
		self.assertFalse(out.has(ScopeVariable("b")))

	def test_quantifier_right_opens_with_an_existential(self):
		ctx = Context.empty().push(UnsolvedExistential("$1"))
		out = self.sut.right(UniversalType("b", FunctionType(TypeVariable("b"), TypeVariable("b"))), "$1", ctx)
		solution = out.resolve(ex("$1"))
		self.assertIsInstance(solution, FunctionType)
		self.assertNotIn(TypeVariable("b"), (solution.argument, solution.result))
		self.assertFalse(out.has(Marker("#1")))
		self.assertEqual(solution.argument, solution.result)

	def test_existential_must_be_unsolved(self):
		ctx = Context.empty().push(SolvedExistential("$1", INT))
		with self.assertRaises(InvalidInstantiation):
			self.sut.left("$1", STRING, ctx)
		with self.assertRaises(InvalidInstantiation):
			self.sut.right(STRING, "$9", ctx)

if __name__ == '__main__':
	unittest.main()
