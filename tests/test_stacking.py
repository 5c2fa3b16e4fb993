import unittest

from cairn.stacking import Scope, DEFAULT_MAX_DEPTH

class ScopeTests(unittest.TestCase):

	def test_root_is_never_popped(self):
		scope = Scope()
		scope.add_variable("a", 1)
		scope.exit_record()
		scope.exit_record()
		self.assertEqual(0, scope.depth)
		self.assertEqual(1, scope.get_variable("a"))

	def test_innermost_binding_wins_until_popped(self):
		scope = Scope()
		scope.add_variable("a", 1)
		scope.enter_record()
		scope.add_variable("a", 2)
		self.assertEqual(2, scope.get_variable("a"))
		self.assertEqual(1, scope.depth)
		scope.exit_record()
		self.assertEqual(1, scope.get_variable("a"))

	def test_outer_bindings_are_visible_from_inside(self):
		scope = Scope()
		scope.add_variable("a", 1)
		scope.enter_record()
		self.assertEqual(1, scope.get_variable("a"))
		self.assertTrue(scope.has_variable("a"))

	def test_add_variable_overwrites_in_the_top_record(self):
		scope = Scope()
		scope.add_variable("a", 1)
		scope.add_variable("a", 2)
		self.assertEqual(2, scope.get_variable("a"))
		self.assertEqual({"a": 2}, scope.top.variables)

	def test_missing_names(self):
		scope = Scope()
		self.assertIsNone(scope.get_variable("nope"))
		self.assertIsNone(scope.get_command("nope"))
		self.assertFalse(scope.has_variable("nope"))
		with self.assertRaises(KeyError):
			scope.fetch_variable("nope")

	def test_none_binding_still_shadows(self):
		scope = Scope()
		scope.add_variable("a", 1)
		scope.enter_record()
		scope.add_variable("a", None)
		self.assertIsNone(scope.fetch_variable("a"))
		self.assertTrue(scope.has_variable("a"))

	def test_commands_scan_outward_too(self):
		scope = Scope()
		scope.add_command("x", "outer")
		scope.enter_record()
		self.assertEqual("outer", scope.get_command("x"))
		scope.add_command("x", "inner")
		self.assertEqual("inner", scope.get_command("x"))
		scope.exit_record()
		self.assertEqual("outer", scope.get_command("x"))

	def test_configuration(self):
		scope = Scope()
		self.assertEqual(DEFAULT_MAX_DEPTH, scope.max_depth)
		self.assertIsNone(scope.external)
		hook = lambda name, args: name
		scope = Scope(max_depth=5, external=hook)
		self.assertEqual(5, scope.max_depth)
		self.assertIs(hook, scope.external)

if __name__ == '__main__':
	unittest.main()
