"""
The most-fundamental vocabulary: kinds of binding, the bindings themselves,
and the shape of a table entry. Everything else builds on these.

A namespace's table maps each local name to one of three things:

* an Entry, which is the ordinary case: up to one binding of each kind,
* a bare Scalar, which is how a host stores a single-valued constant,
* a bare Sequence, which is how a host stores a list-constant.

A constant may instead live in the Callable slot of an Entry, as a producer
of its values. Hosts choose among these forms for their own reasons, and may
change their minds between one lookup and the next.
"""
from enum import Enum
from typing import Any, NamedTuple, Optional, Union

SEPARATOR = "."

class AlreadyExists(KeyError): pass

class Kind(Enum):
	SCALAR = "$"
	SEQUENCE = "@"
	MAPPING = "%"
	CALLABLE = "&"

MARKERS = {k.value: k for k in Kind}

class Want(Enum):
	""" The evaluation context a caller declares: one value, or a list of them. """
	SCALAR = "scalar"
	LIST = "list"

class Binding:
	"""
	A reference into storage the host owns.
	Nothing here copies the host's object; a handle is the object.
	"""
	kind: Kind

class Scalar(Binding):
	kind = Kind.SCALAR
	def __init__(self, value:Any): self.value = value
	def __repr__(self): return "<Scalar %r>" % (self.value,)

class Sequence(Binding):
	kind = Kind.SEQUENCE
	def __init__(self, values): self.values = values
	def __repr__(self): return "<Sequence %r>" % (self.values,)

class Mapping(Binding):
	kind = Kind.MAPPING
	def __init__(self, items:dict): self.items = items
	def __repr__(self): return "<Mapping %r>" % (self.items,)

class Callable(Binding):
	"""
	Invoked with no arguments. When a Callable stands in for a constant,
	it returns a tuple or list of the constant's values; any other result
	counts as a single value.
	"""
	kind = Kind.CALLABLE
	def __init__(self, producer): self.producer = producer
	def __call__(self): return self.producer()
	def __repr__(self): return "<Callable %r>" % (self.producer,)

class Entry:
	""" The ordinary sort of table entry: at most one binding of each kind. """
	_slots: dict[Kind, Binding]

	def __init__(self):
		self._slots = {}

	def __repr__(self):
		return "<Entry %s>" % ''.join(k.value for k in self.kinds())

	def slot(self, kind:Kind) -> Optional[Binding]:
		return self._slots.get(kind)

	def kinds(self) -> list[Kind]:
		return [k for k in Kind if k in self._slots]

	def describe(self) -> str:
		held = ', '.join(k.name.lower() for k in self.kinds())
		return "regular entry (holding %s)" % (held or "nothing")

	def mount(self, binding:Binding) -> Binding:
		assert isinstance(binding, Binding), binding
		if binding.kind in self._slots:
			raise AlreadyExists(binding.kind)
		self._slots[binding.kind] = binding
		return binding

TableValue = Union[Entry, Scalar, Sequence]

class Parsed(NamedTuple):
	kind: Optional[Kind]
	path: tuple[str, ...]  # Empty means the caller's namespace.
	local: str
