"""
The expression language, in simple form.
Something upstream (a parser, a test, the zoo) builds these trees;
the checker only ever reads them.
"""
from dataclasses import dataclass
from typing import Union
from .algebra import Type

@dataclass(frozen=True)
class IntegerLiteral:
	value: int

@dataclass(frozen=True)
class StringLiteral:
	value: str

@dataclass(frozen=True)
class VariableReference:
	name: str

@dataclass(frozen=True)
class TypeAnnotation:
	""" An expression ascribed a type: (e : A) """
	expr: "Expression"
	type: Type

@dataclass(frozen=True)
class LambdaAbstraction:
	param_name: str
	body: "Expression"

@dataclass(frozen=True)
class Application:
	function: "Expression"
	argument: "Expression"

Expression = Union[
	IntegerLiteral, StringLiteral, VariableReference,
	TypeAnnotation, LambdaAbstraction, Application,
]

EXPRESSIONS = (
	IntegerLiteral, StringLiteral, VariableReference,
	TypeAnnotation, LambdaAbstraction, Application,
)

def is_expression(it) -> bool:
	return isinstance(it, EXPRESSIONS)
