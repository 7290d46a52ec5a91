"""
A bidirectional type checker for a small lambda calculus with higher-rank polymorphism.

{0}

There is no parser yet: programs come from the built-in zoo. For example:

    hirank apply_identity poly_arg

will infer and print the types of those two programs, and

    hirank -l

will list everything in the zoo. Add -v to watch the derivation unfold.
"""
import sys, argparse

parser = argparse.ArgumentParser(
	prog="hirank",
	description="Bidirectional type checker with higher-rank polymorphism.",
)
parser.add_argument("program", nargs="*", help="names of programs in the zoo; try apply_identity for example.")
parser.add_argument('-l', "--list", action="store_true", help="List the programs in the zoo, then stop.")
parser.add_argument('-v', "--verbose", action="count", help="Trace every judgment on stderr.")

def run(args):
	from . import zoo
	from .check import TypeChecker
	from .diagnostics import Report, TypeCheckError
	if args.list:
		for name, description in zoo.describe():
			print("%-24s %s"%(name, description))
		return 0
	programs = {name: case[1] for name, case in (zoo.OK | zoo.FAIL).items()}
	unknown = [name for name in args.program if name not in programs]
	if unknown:
		print("No such program in the zoo:", ", ".join(unknown), file=sys.stderr)
		return 2
	report = Report(verbose=args.verbose)
	for name in args.program:
		report.info("Checking", name)
		try: typ = TypeChecker(report).infer(programs[name])
		except TypeCheckError as ex: report.issue(ex)
		else: print(name, ":", typ)
	if report.sick():
		report.complain_to_console()
		return 1
	return 0

def main():
	if len(sys.argv) > 1:
		sys.exit(run(parser.parse_args()))
	else:
		print(__doc__.strip().format(parser.format_usage()))
