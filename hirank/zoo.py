"""
A zoo of small programs, already in tree form, with what each should come to.

OK maps a name to (description, expression, expected type).
FAIL maps a name to (description, expression, expected exception class).
"""
from .syntax import (
	IntegerLiteral as Int, StringLiteral as Str, VariableReference as Var,
	TypeAnnotation as Ann, LambdaAbstraction as Lam, Application as App,
)
from .algebra import (
	IntType, StringType, TypeVariable, ExistentialVariable, FunctionType as Fn, UniversalType as Forall,
)
from . import diagnostics

INT, STRING = IntType(), StringType()
a, b = TypeVariable("a"), TypeVariable("b")

POLY_IDENTITY = Forall("a", Fn(a, a))
identity = Ann(Lam("x", Var("x")), POLY_IDENTITY)
call_with_42 = Ann(Lam("f", App(Var("f"), Int(42))), Fn(Fn(INT, INT), INT))

# Rank-2: the argument must itself be polymorphic, and gets used at two types.
RANK_TWO = Fn(POLY_IDENTITY, INT)
use_twice = Ann(
	Lam("i", App(Ann(Lam("_", App(Var("i"), Int(1))), Fn(STRING, INT)), App(Var("i"), Str("two")))),
	RANK_TWO,
)

K = Forall("a", Forall("b", Fn(a, Fn(b, a))))
konst = Ann(Lam("x", Lam("y", Var("x"))), K)

OK = {
	"forty_two": ("An integer literal.", Int(42), INT),
	"hello": ("A string literal.", Str("hello"), STRING),
	"annotated_hello": ("A string literal, ascribed its own type.", Ann(Str("hello"), STRING), STRING),
	"identity": ("The polymorphic identity function, annotated.", identity, POLY_IDENTITY),
	"call_with_42": ("A function which applies its argument to 42.", call_with_42, Fn(Fn(INT, INT), INT)),
	"apply_identity": ("Pass the polymorphic identity where int -> int is wanted.", App(call_with_42, identity), INT),
	"identity_at_int": ("Instantiate the identity by applying it.", App(identity, Int(7)), INT),
	"identity_at_string": ("Same again, at string.", App(identity, Str("seven")), STRING),
	"rank_two": ("A function whose parameter must be polymorphic.", use_twice, RANK_TWO),
	"poly_arg": ("Hand the identity to the rank-2 function.", App(use_twice, identity), INT),
	"const": ("The K combinator, nested quantifiers.", konst, K),
	"const_applied": ("K applied twice, at different types.", App(App(konst, Int(1)), Str("one")), INT),
	"shadowing": (
		"An inner lambda's parameter hides an outer one of the same name.",
		Ann(Lam("x", Lam("x", Var("x"))), Fn(INT, Fn(STRING, STRING))),
		Fn(INT, Fn(STRING, STRING)),
	),
	"lambda_synthesized": (
		"An unannotated constant function: the parameter stays an existential.",
		Lam("x", Int(1)),
		Fn(ExistentialVariable("$1"), INT),
	),
	"unannotated_apply": (
		"An unannotated lambda, applied.",
		App(Lam("x", Var("x")), Int(3)),
		INT,
	),
}

FAIL = {
	"unknown_variable": ("A free variable.", Var("x"), diagnostics.UnknownVariable),
	"ill_formed_annotation": (
		"An annotation mentioning a type variable nobody bound.",
		Ann(Int(1), a),
		diagnostics.InvalidType,
	),
	"int_is_not_string": ("A string ascribed integer type.", Ann(Str("one"), INT), diagnostics.SubtypeMismatch),
	"apply_a_literal": ("Calling a number.", App(Int(1), Int(2)), diagnostics.InvalidApplication),
	"wrong_argument": ("Feeding a string to call_with_42.", App(call_with_42, Str("nope")), diagnostics.SubtypeMismatch),
	"not_polymorphic_enough": (
		"Only int -> int is on offer where forall a. a -> a is wanted.",
		App(use_twice, Ann(Lam("n", Var("n")), Fn(INT, INT))),
		diagnostics.SubtypeMismatch,
	),
	"circular": (
		"Self-application, which would need a type containing itself.",
		Lam("x", App(Var("x"), Var("x"))),
		diagnostics.CircularInstantiation,
	),
	"rigid_variable": (
		"Claim the identity is constant at int.",
		Ann(Lam("x", Int(0)), POLY_IDENTITY),
		diagnostics.SubtypeMismatch,
	),
}

def describe():
	for name, (description, *_) in OK.items():
		yield name, description
	for name, (description, *_) in FAIL.items():
		yield name, description
