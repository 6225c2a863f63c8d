"""
The public face of the library: read-only queries over a namespace tree.

	it = Introspector(root)
	it.get("$App.name", caller="App")          # the Scalar binding itself
	it.get("App.myConst", caller="Main")       # a constant, in data form only
	it.copy_constant("App.myConst", caller="") # its value, whatever the form
	it.list_names("App", caller="")            # the names bound in App

The tree belongs to the host, which passes it in. Each call also names the
caller's own namespace, which stands in for any name written without one.
"""
from typing import Optional

from .accessors import TypedAccessor, ConstantAccessor
from .diagnostics import InvalidName, UnrecognizedKindMarker, ContextMismatch
from .front_end import parse
from .ontology import Binding, Want
from .resolution import BindingResolver
from .space import NamespaceNode

class Introspector:
	def __init__(self, root:NamespaceNode):
		self._resolver = BindingResolver(root)
		self._typed = TypedAccessor(self._resolver)
		self._constants = ConstantAccessor(self._resolver)

	def get(self, name:str, *, caller:str) -> Optional[Binding]:
		"""
		With a kind marker, the binding of that kind or None.
		Without one, a constant stored as data: a callable standing
		in for a constant is refused, never invoked.
		"""
		parsed = parse(name)
		if parsed.kind is None:
			return self._constants.get_constant(parsed, caller)
		return self._typed.get_typed(parsed, caller)

	def copy_constant(self, name:str, *, caller:str, want:Want=Want.SCALAR):
		try: parsed = parse(name)
		except UnrecognizedKindMarker as ex:
			raise InvalidName(name, 0, 1, "Constants are named like identifiers") from ex
		if parsed.kind is not None:
			raise InvalidName(name, 0, 1, "Constants are named without a kind marker")
		return self._constants.copy_constant(parsed, caller, want)

	def list_names(self, namespace:Optional[str]=None, *, caller:str, want:Want=Want.LIST) -> list[str]:
		"""
		Malformed namespace text raises InvalidName, the same as
		any other name this library is asked to read.
		"""
		if want is not Want.LIST:
			raise ContextMismatch("list_names()", want)
		node = self._resolver.lookup_namespace(caller if namespace is None else namespace)
		return node.names()
