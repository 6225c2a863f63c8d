"""
Turn the text of a name into a Parsed triple: kind, namespace path, local name.

The grammar is small enough that a regular expression per segment does the job:

	name      := [marker] segment ("." segment)*
	marker    := "$" | "@" | "%" | "&"
	segment   := word-character+

Without a marker, the text must begin like an identifier, and the lookup
is for a constant.
"""
import re

from .diagnostics import InvalidName, UnrecognizedKindMarker
from .ontology import SEPARATOR, MARKERS, Parsed

_SEGMENT = re.compile(r"\w+")
_IDENTIFIER_START = re.compile(r"[A-Za-z_]")

def parse(raw:str) -> Parsed:
	if not isinstance(raw, str) or not raw:
		raise InvalidName("", 0, 0, "Need a variable or constant name")
	lead = raw[0]
	if lead in MARKERS:
		kind, offset = MARKERS[lead], 1
	elif _IDENTIFIER_START.match(lead):
		kind, offset = None, 0
	else:
		raise UnrecognizedKindMarker(raw)
	segments = _split(raw, offset)
	return Parsed(kind, tuple(segments[:-1]), segments[-1])

def split_namespace(text:str) -> tuple[str, ...]:
	""" The empty string is the root namespace. """
	if text == "": return ()
	return tuple(_split(text, 0))

def _split(text:str, offset:int) -> list[str]:
	segments = text[offset:].split(SEPARATOR)
	column = offset
	for seg in segments:
		if not _SEGMENT.fullmatch(seg):
			reason = "Empty name segment" if seg == "" else "Malformed name segment"
			raise InvalidName(text, column, len(seg), reason)
		column += len(seg) + len(SEPARATOR)
	return segments

def qualified_name(parsed:Parsed, caller:str) -> str:
	""" The name as the caller ought to have written it in full. """
	path = parsed.path or split_namespace(caller)
	return SEPARATOR.join(path + (parsed.local,))
