"""
Pulling bindings and constants out of a resolved table.

Both accessors dispatch over the three shapes a table value may take
(Entry, bare Scalar, bare Sequence) with a Visitor, so each shape gets
its own method and an unforeseen shape fails loudly.

Constants are the interesting part. The same logical constant may be
stored as data (a bare Scalar or Sequence) or as a producer (the Callable
slot of an Entry), depending on the host's mood. Raw-handle mode insists
on data, because it hands out a reference to the stored thing, and never
invokes anything. Copy mode accepts every form and hands out values.
"""
from typing import Optional
from boozetools.support.foundation import Visitor

from .diagnostics import NotAConstant, ContextMismatch
from .front_end import qualified_name
from .ontology import Binding, Entry, Kind, Parsed, Scalar, Sequence, Want
from .resolution import BindingResolver

class TypedAccessor(Visitor):
	""" For names written with a kind marker. """
	def __init__(self, resolver:BindingResolver):
		self._resolver = resolver

	def get_typed(self, parsed:Parsed, caller:str) -> Optional[Binding]:
		"""
		None means there is no binding of that kind under that name.
		That is an answer, not a failure.
		"""
		assert parsed.kind is not None, parsed
		found = self._resolver.table_for(parsed, caller).get(parsed.local)
		if found is None: return None
		return self.visit(found, parsed.kind)

	def visit_Entry(self, entry:Entry, kind:Kind): return entry.slot(kind)
	def visit_Scalar(self, scalar:Scalar, kind:Kind): return scalar if kind is Kind.SCALAR else None
	def visit_Sequence(self, seq:Sequence, kind:Kind): return seq if kind is Kind.SEQUENCE else None


class _RawHandle(Visitor):
	def visit_Scalar(self, scalar:Scalar, qualified:str): return scalar
	def visit_Sequence(self, seq:Sequence, qualified:str): return seq
	def visit_Entry(self, entry:Entry, qualified:str):
		if entry.slot(Kind.CALLABLE) is None:
			raise NotAConstant(qualified, entry.describe())
		hint = "If its callable produces a constant, copy_constant() will invoke it."
		raise NotAConstant(qualified, entry.describe(), hint)

class _CopyValues(Visitor):
	def visit_Scalar(self, scalar:Scalar, qualified:str): return (scalar.value,)
	def visit_Sequence(self, seq:Sequence, qualified:str): return tuple(seq.values)
	def visit_Entry(self, entry:Entry, qualified:str):
		producer = entry.slot(Kind.CALLABLE)
		if producer is None:
			raise NotAConstant(qualified, entry.describe())
		output = producer()
		if isinstance(output, (tuple, list)):
			return tuple(output)
		return (output,)

_RAW_HANDLE = _RawHandle()
_COPY_VALUES = _CopyValues()

class ConstantAccessor:
	""" For names written without a kind marker. """
	def __init__(self, resolver:BindingResolver):
		self._resolver = resolver

	def _find(self, parsed:Parsed, caller:str):
		assert parsed.kind is None, parsed
		found = self._resolver.table_for(parsed, caller).get(parsed.local)
		qualified = qualified_name(parsed, caller)
		if found is None:
			raise NotAConstant(qualified, "name with no binding")
		return found, qualified

	def get_constant(self, parsed:Parsed, caller:str) -> Binding:
		found, qualified = self._find(parsed, caller)
		return _RAW_HANDLE.visit(found, qualified)

	def copy_values(self, parsed:Parsed, caller:str) -> tuple:
		found, qualified = self._find(parsed, caller)
		return _COPY_VALUES.visit(found, qualified)

	def copy_constant(self, parsed:Parsed, caller:str, want:Want):
		"""
		In list context, always a tuple, perhaps empty.
		In scalar context, exactly one value or else ContextMismatch.
		"""
		values = self.copy_values(parsed, caller)
		if want is Want.LIST:
			return values
		if len(values) != 1:
			raise ContextMismatch(qualified_name(parsed, caller), want, len(values))
		return values[0]
