"""
Let the running interpreter play host: mirror Python modules into a namespace tree.

Each module becomes the namespace of its dotted name. Its attributes become bindings:

* names in UPPER_CASE are constants, kept in data form,
* lists and tuples are sequences, dicts are mappings,
* anything callable (classes included) is a callable,
* everything else is a scalar.

Sub-modules that are already imported become child namespaces.
A module merely imported by another one (say, "os" inside "json") is not
its child, and is left out. So are underscored names, unless asked for.
"""
import types
from importlib import import_module

from ..diagnostics import UnknownNamespace
from ..ontology import SEPARATOR, Scalar, Sequence, Mapping, Callable
from ..space import NamespaceNode

def mirror(root:NamespaceNode, *module_names:str, private:bool=False) -> list[NamespaceNode]:
	it = Mirror(root, private=private)
	return [it.mirror_module(name) for name in module_names]

class Mirror:
	"""
	Remembers which modules it has done, so that asking for a package
	and then for one of its sub-modules does not mirror anything twice.
	"""
	def __init__(self, root:NamespaceNode, *, private:bool=False):
		self._root = root
		self._private = private
		self._done = {}

	def mirror_module(self, module_name:str) -> NamespaceNode:
		"""
		A module that cannot be found is an unknown namespace.
		A module that breaks while importing raises whatever it raised.
		"""
		try: py_module = import_module(module_name)
		except ModuleNotFoundError as ex:
			raise UnknownNamespace(module_name) from ex
		return self.module(py_module, module_name)

	def module(self, py_module:types.ModuleType, name:str=None) -> NamespaceNode:
		"""
		The namespace is the name asked for, which differs from __name__
		for an alias such as os.path (really posixpath or ntpath).
		"""
		name = name or py_module.__name__
		if name not in self._done:
			node = self._done[name] = self._root.child(*name.split(SEPARATOR))
			for key, value in list(vars(py_module).items()):
				if key.startswith("_") and not self._private: continue
				if isinstance(value, types.ModuleType):
					if value.__name__ == py_module.__name__ + SEPARATOR + key:
						self.module(value, name + SEPARATOR + key)
				else:
					self._attribute(node, key, value)
		return self._done[name]

	@staticmethod
	def _attribute(node:NamespaceNode, key:str, value):
		if key.isupper():
			if isinstance(value, (list, tuple)):
				node.place(key, Sequence(value))
			else:
				node.place(key, Scalar(value))
		elif isinstance(value, (list, tuple)):
			node.bind(key, Sequence(value))
		elif isinstance(value, dict):
			node.bind(key, Mapping(value))
		elif callable(value):
			node.bind(key, Callable(value))
		else:
			node.bind(key, Scalar(value))
