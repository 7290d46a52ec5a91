import unittest

from hirank import zoo
from hirank.check import infer
from hirank.diagnostics import TypeCheckError

class ZooOfOk(unittest.TestCase):
	""" Everything in the zoo that should check, does, and comes out as advertised. """
	def test_zoo_of_ok(self):
		for name, (_, expr, expected) in zoo.OK.items():
			with self.subTest(name):
				self.assertEqual(expected, infer(expr))

class ZooOfFail(unittest.TestCase):
	""" Tests that assert about failure modes. """
	def test_zoo_of_fail(self):
		for name, (_, expr, error) in zoo.FAIL.items():
			with self.subTest(name):
				with self.assertRaises(error) as cm:
					infer(expr)
				self.assertIsInstance(cm.exception, TypeCheckError)
				self.assertTrue(str(cm.exception))

	def test_names_are_distinct(self):
		self.assertFalse(set(zoo.OK) & set(zoo.FAIL))
		self.assertEqual(len(zoo.OK) + len(zoo.FAIL), len(list(zoo.describe())))

if __name__ == '__main__':
	unittest.main()
