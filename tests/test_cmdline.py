import unittest
from unittest import mock
import io

from hirank import cmdline

def _run(*argv):
	out, err = io.StringIO(), io.StringIO()
	with mock.patch("sys.stdout", out), mock.patch("sys.stderr", err):
		status = cmdline.run(cmdline.parser.parse_args(list(argv)))
	return status, out.getvalue(), err.getvalue()

class CommandLineTests(unittest.TestCase):
	def test_good_programs(self):
		status, out, err = _run("apply_identity", "identity")
		self.assertEqual(0, status)
		self.assertEqual(["apply_identity : int", "identity : forall a. a -> a"], out.splitlines())
		self.assertEqual("", err)

	def test_bad_program(self):
		status, out, err = _run("forty_two", "unknown_variable")
		self.assertEqual(1, status)
		self.assertEqual("forty_two : int\n", out)
		self.assertIn("UnknownVariable", err)

	def test_no_such_program(self):
		status, out, err = _run("bogus")
		self.assertEqual(2, status)
		self.assertIn("bogus", err)

	def test_list(self):
		status, out, err = _run("-l")
		self.assertEqual(0, status)
		self.assertIn("poly_arg", out)
		self.assertIn("circular", out)

	def test_verbose(self):
		status, out, err = _run("-v", "poly_arg")
		self.assertEqual(0, status)
		self.assertIn("Checking poly_arg", err)
		self.assertIn("subtype", err)

	def test_main_without_arguments_prints_usage(self):
		out = io.StringIO()
		with mock.patch("sys.argv", ["hirank"]), mock.patch("sys.stdout", out):
			cmdline.main()
		self.assertIn("usage: hirank", out.getvalue())

	def test_main_exits_with_status(self):
		with mock.patch("sys.argv", ["hirank", "int_is_not_string"]), mock.patch("sys.stderr", io.StringIO()):
			with self.assertRaises(SystemExit) as cm:
				cmdline.main()
		self.assertEqual(1, cm.exception.code)

if __name__ == '__main__':
	unittest.main()
