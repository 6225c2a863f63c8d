import io, os, sys, types
import unittest
from contextlib import redirect_stdout, redirect_stderr
from unittest import mock

from symget.adapters.python_modules import Mirror, mirror
from symget.cmdline import parser, run
from symget.diagnostics import UnknownNamespace
from symget.introspect import Introspector
from symget.ontology import Scalar, Sequence, Want
from symget.space import NamespaceNode

def _fake_package():
	pkg = types.ModuleType("fakepkg")
	pkg.GREETING = "hello"
	pkg.COLORS = ("red", "green")
	pkg.name = "haha"
	pkg.items = [1, 2, 3]
	pkg.table = {"a": 1}
	pkg.doit = lambda: "done"
	pkg._hidden = 1
	pkg.os = os
	sub = types.ModuleType("fakepkg.sub")
	sub.VALUE = 7
	pkg.sub = sub
	return {"fakepkg": pkg, "fakepkg.sub": sub}

class MirrorTests(unittest.TestCase):

	def setUp(self) -> None:
		self.modules = _fake_package()
		patcher = mock.patch.dict(sys.modules, self.modules)
		patcher.start()
		self.addCleanup(patcher.stop)
		self.root = NamespaceNode()
		self.sut = Introspector(self.root)

	def test_module_becomes_a_namespace(self):
		node, = mirror(self.root, "fakepkg")
		self.assertEqual(("fakepkg",), node.path)
		self.assertSetEqual(
			{"GREETING", "COLORS", "name", "items", "table", "doit"},
			set(self.sut.list_names("fakepkg", caller="")),
		)

	def test_classification(self):
		pkg = self.modules["fakepkg"]
		mirror(self.root, "fakepkg")
		self.assertEqual("haha", self.sut.get("$fakepkg.name", caller="").value)
		self.assertIs(pkg.items, self.sut.get("@fakepkg.items", caller="").values)
		self.assertIs(pkg.table, self.sut.get("%fakepkg.table", caller="").items)
		self.assertIs(pkg.doit, self.sut.get("&fakepkg.doit", caller="").producer)

	def test_upper_case_names_are_constants_in_data_form(self):
		mirror(self.root, "fakepkg")
		greeting = self.sut.get("GREETING", caller="fakepkg")
		self.assertIsInstance(greeting, Scalar)
		colors = self.sut.get("COLORS", caller="fakepkg")
		self.assertIsInstance(colors, Sequence)
		self.assertIs(self.modules["fakepkg"].COLORS, colors.values)
		self.assertEqual(("red", "green"), self.sut.copy_constant("COLORS", caller="fakepkg", want=Want.LIST))

	def test_submodules_are_children_but_imports_are_not(self):
		mirror(self.root, "fakepkg")
		self.assertEqual(["sub"], self.root.resolve(["fakepkg"]).children())
		self.assertEqual(7, self.sut.copy_constant("fakepkg.sub.VALUE", caller=""))

	def test_private_names_on_request(self):
		mirror(self.root, "fakepkg", private=True)
		self.assertIn("_hidden", self.sut.list_names("fakepkg", caller=""))

	def test_nothing_is_mirrored_twice(self):
		it = Mirror(self.root)
		package = it.mirror_module("fakepkg")
		self.assertIs(package.resolve(["sub"]), it.mirror_module("fakepkg.sub"))
		self.assertIs(package, it.mirror_module("fakepkg"))

	def test_aliased_module_lands_where_it_was_asked_for(self):
		alias = types.ModuleType("fakepkg_real_impl")
		alias.join = lambda *parts: "/".join(parts)
		with mock.patch.dict(sys.modules, {"fakepkg.alias": alias}):
			node, = mirror(self.root, "fakepkg.alias")
		self.assertEqual(("fakepkg", "alias"), node.path)
		self.assertIsNone(self.root.resolve(["fakepkg_real_impl"]))
		self.assertIs(alias.join, self.sut.get("&fakepkg.alias.join", caller="").producer)

	def test_children_follow_the_name_asked_for(self):
		impl = types.ModuleType("impl")
		inner = types.ModuleType("impl.inner")
		inner.VALUE = 3
		impl.inner = inner
		with mock.patch.dict(sys.modules, {"fakepkg.facade": impl}):
			mirror(self.root, "fakepkg.facade")
		self.assertEqual(3, self.sut.copy_constant("fakepkg.facade.inner.VALUE", caller=""))

	def test_missing_module(self):
		with self.assertRaises(UnknownNamespace):
			mirror(self.root, "no_such_module_for_symget")

class CommandLineTests(unittest.TestCase):

	def setUp(self) -> None:
		patcher = mock.patch.dict(sys.modules, _fake_package())
		patcher.start()
		self.addCleanup(patcher.stop)

	def _run(self, *argv):
		out, err = io.StringIO(), io.StringIO()
		with redirect_stdout(out), redirect_stderr(err):
			status = run(parser.parse_args(argv))
		return status, out.getvalue(), err.getvalue()

	def test_get(self):
		status, out, err = self._run("-m", "fakepkg", "$fakepkg.name")
		self.assertEqual(0, status)
		self.assertEqual("<Scalar 'haha'>\n", out)

	def test_copy_defaults_to_the_first_module(self):
		status, out, err = self._run("-m", "fakepkg", "--copy", "COLORS")
		self.assertEqual(0, status)
		self.assertEqual("'red'\n'green'\n", out)

	def test_list(self):
		status, out, err = self._run("-m", "fakepkg", "--list", "fakepkg")
		self.assertEqual(0, status)
		self.assertEqual(sorted(["GREETING", "COLORS", "name", "items", "table", "doit"]), out.split())

	def test_explicit_caller_namespace(self):
		status, out, err = self._run("-m", "fakepkg", "-n", "fakepkg.sub", "--copy", "VALUE")
		self.assertEqual(0, status)
		self.assertEqual("7\n", out)

	def test_verbose(self):
		status, out, err = self._run("-v", "-m", "fakepkg", "$name")
		self.assertEqual(0, status)
		self.assertIn("Mirroring fakepkg", err)

	def test_bad_name(self):
		status, out, err = self._run("-m", "fakepkg", "*oops")
		self.assertEqual(1, status)
		self.assertIn("could not make sense", err)

	def test_unknown_module(self):
		status, out, err = self._run("-m", "no_such_module_for_symget", "x")
		self.assertEqual(1, status)
		self.assertIn("Unknown namespace", err)

	def test_not_a_constant(self):
		status, out, err = self._run("-m", "fakepkg", "doit")
		self.assertEqual(1, status)
		self.assertIn("not a constant", err)

	@mock.patch("symget.adapters.python_modules.import_module", side_effect=ImportError("kaboom"))
	def test_broken_module(self, import_module):
		status, out, err = self._run("-m", "fakepkg", "x")
		self.assertEqual(1, status)
		self.assertIn("kaboom", err)

	@mock.patch("symget.adapters.python_modules.import_module", side_effect=ValueError("not an import problem"))
	def test_module_raising_something_else(self, import_module):
		status, out, err = self._run("-m", "fakepkg", "x")
		self.assertEqual(1, status)
		self.assertIn("not an import problem", err)


if __name__ == '__main__':
	unittest.main()
