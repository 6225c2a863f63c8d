"""
Find the table that owns a name.

Resolution always walks from the root. Hosts create namespaces whenever
they please, so a path that failed a moment ago may succeed now.
"""
from .diagnostics import UnknownNamespace
from .front_end import parse, split_namespace
from .ontology import SEPARATOR, Parsed
from .space import NamespaceNode

class BindingResolver:
	def __init__(self, root:NamespaceNode):
		self._root = root

	def lookup_namespace(self, namespace:str) -> NamespaceNode:
		node = self._root.resolve(split_namespace(namespace))
		if node is None:
			raise UnknownNamespace(namespace)
		return node

	def table_for(self, parsed:Parsed, caller:str):
		""" An empty path means the caller's own namespace. """
		path = parsed.path or split_namespace(caller)
		node = self._root.resolve(path)
		if node is None:
			raise UnknownNamespace(SEPARATOR.join(path))
		return node.table()

	def lookup_table(self, qualified:str, caller:str):
		parsed = parse(qualified)
		return self.table_for(parsed, caller), parsed
