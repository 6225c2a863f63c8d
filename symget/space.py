"""
The namespace tree, as a host runtime builds it.

Queries only ever read from these nodes. The population methods at the
bottom of NamespaceNode are for hosts (and adapters, and tests); nothing
on a lookup path calls them.

About threads: every step of a lookup is a single dictionary read, which
the interpreter performs atomically. So each node is seen in some consistent
state, but a lookup racing a host that rearranges the tree may see one node
before the change and the next node after it. Whole lookups are not atomic
with respect to host-side mutation; hosts that care must serialize.
"""
from types import MappingProxyType
from typing import Iterable, Optional

from .ontology import SEPARATOR, AlreadyExists, Binding, Callable, Entry, Scalar, Sequence, TableValue

class NamespaceNode:
	path: tuple[str, ...]
	_children: dict[str, "NamespaceNode"]
	_table: dict[str, TableValue]

	def __init__(self, path:tuple[str, ...]=()):
		self.path = path
		self._children, self._table = {}, {}

	def __repr__(self): return "<Namespace %r>" % (self.name() or "(root)")

	def name(self) -> str: return SEPARATOR.join(self.path)

	def resolve(self, path:Iterable[str]) -> Optional["NamespaceNode"]:
		""" Walk down from here. None as soon as some segment is missing. """
		node = self
		for segment in path:
			node = node._children.get(segment)
			if node is None: return None
		return node

	def table(self):
		""" A read-only view of the live table, not a copy. """
		return MappingProxyType(self._table)

	def names(self) -> list[str]: return list(self._table)

	def children(self) -> list[str]: return list(self._children)

	# Host-side population:

	def child(self, *segments:str) -> "NamespaceNode":
		""" Find or make the descendant along these segments. """
		node = self
		for segment in segments:
			if segment not in node._children:
				node._children[segment] = NamespaceNode(node.path + (segment,))
			node = node._children[segment]
		return node

	def bind(self, name:str, binding:Binding) -> Binding:
		existing = self._table.get(name)
		if existing is None:
			existing = self._table[name] = Entry()
		elif not isinstance(existing, Entry):
			# A constant in data form owns its name outright.
			raise AlreadyExists(name)
		return existing.mount(binding)

	def define_constant(self, name:str, *values, producer:bool=False) -> TableValue:
		"""
		Store a constant the way a host might. In data form, one value
		makes a bare Scalar and any other number makes a bare Sequence.
		With producer=True, it becomes the Callable slot of a regular entry.
		"""
		if name in self._table:
			raise AlreadyExists(name)
		if producer:
			self.bind(name, Callable(lambda: values))
			return self._table[name]
		elif len(values) == 1:
			return self.place(name, Scalar(values[0]))
		else:
			return self.place(name, Sequence(list(values)))

	def place(self, name:str, data:Scalar|Sequence) -> TableValue:
		""" Store a constant in data form, keeping the very binding given. """
		assert isinstance(data, (Scalar, Sequence)), data
		if name in self._table:
			raise AlreadyExists(name)
		self._table[name] = data
		return data
