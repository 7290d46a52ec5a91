import sys, random
from contextlib import contextmanager
from typing import Any

class TypeCheckError(Exception):
	"""
	Base of everything the checker raises.
	Each subclass supplies a gripe: a %-pattern over the offending terms.
	"""
	gripe: str = "Type-checking failed: %s"
	def __init__(self, *terms):
		super().__init__(*terms)
		self.terms = terms
	def __str__(self):
		return self.gripe % tuple(map(str, self.terms))

class UnknownVariable(TypeCheckError):
	gripe = "I don't see what '%s' refers to."

class InvalidType(TypeCheckError):
	gripe = "The annotation %s mentions something not in scope."

class UnknownExpression(TypeCheckError):
	gripe = "This is not an expression I know how to check: %r"
	def __str__(self): return self.gripe % self.terms

class UnknownType(TypeCheckError):
	gripe = "This is not a type I understand: %r"
	def __str__(self): return self.gripe % self.terms

class SubtypeMismatch(TypeCheckError):
	gripe = "This needs %s to be usable as %s, which cannot happen."

class CircularInstantiation(TypeCheckError):
	gripe = "This tries to equate %s with %s which contains it, but a type cannot be part of itself."

class InvalidInstantiation(TypeCheckError):
	gripe = "There is no way to solve %s against %s."

class InvalidApplication(TypeCheckError):
	gripe = "Dunno how to call something of type %s as a function."

def _outburst():
	particle = ["Oh, ", "Well, ", "Aw, ", "", ""]
	minced_oaths = [
		'Ack', 'Blargh', 'Confound it', 'Crud', 'Curses', 'Drat',
		'Fiddlesticks', 'Good Grief', 'Great Scott', 'Jeepers', 'Nuts', 'Rats',
	]
	resignations = [
		'That does not type-check.',
		'The types refuse to line up.',
		'I cannot continue.',
	]
	return "%s%s! %s"%tuple(map(random.choice, (particle, minced_oaths, resignations)))

class Report:
	"""
	Collects failures for the console, and narrates the derivation when verbose.
	The checker itself raises; whoever drives it decides whether to issue() the exception here.
	"""
	_issues : list[TypeCheckError]

	def __init__(self, *, verbose:int=0):
		self._verbose = verbose or 0   # Because None is incomparable.
		self._issues = []
		self._depth = 0

	def ok(self): return not self._issues
	def sick(self): return bool(self._issues)

	@property
	def issues(self): return tuple(self._issues)

	def issue(self, it:Any):
		self._issues.append(it)

	def reset(self):
		self._issues.clear()
		self._depth = 0

	def info(self, *args):
		if self._verbose:
			print(*args, file=sys.stderr)

	@contextmanager
	def judging(self, judgment:str, *args):
		""" One line of trace per judgment, indented by how deep the derivation is. """
		if self._verbose:
			print("  "*self._depth + judgment, *args, file=sys.stderr)
		self._depth += 1
		try: yield
		finally: self._depth -= 1

	def complain_to_console(self):
		""" Emit all the issues to the console. """
		if self._issues:
			print("*"*60, file=sys.stderr)
			print(_outburst(), file=sys.stderr)
		for i in self._issues:
			print("  -"*20, file=sys.stderr)
			print(type(i).__name__+":", i, file=sys.stderr)
		sys.stderr.flush()

	def assert_no_issues(self, message):
		""" Does what it says on the tin """
		if self._issues:
			self.complain_to_console()
			raise AssertionError(_outburst()+" "+message)
