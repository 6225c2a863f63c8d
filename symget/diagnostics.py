"""
Everything that can go wrong with a lookup, and the means to explain it.

The library raises; only the command-line front-end collects the problem
into a Report and bemoans it to the console.
"""
import sys, random
from traceback import TracebackException
from typing import Any, Optional
from boozetools.support.failureprone import illustration

class SymbolError(Exception):
	""" Base for everything a lookup raises at its caller. """

class MalformedInput(SymbolError):
	""" Something about the text itself. These know where the fault lies. """
	def __init__(self, text:str, column:int, width:int, reason:str):
		super().__init__("%s: %r" % (reason, text))
		self.text, self.column, self.width, self.reason = text, column, width, reason

class InvalidName(MalformedInput): pass

class UnrecognizedKindMarker(MalformedInput):
	def __init__(self, text:str):
		super().__init__(text, 0, 1, "Unrecognized kind marker %r" % text[0])
		self.marker = text[0]

class UnknownNamespace(SymbolError):
	def __init__(self, namespace:str):
		super().__init__("Unknown namespace: %r" % namespace)
		self.namespace = namespace

class NotAConstant(SymbolError):
	def __init__(self, qualified:str, representation:str, hint:str=""):
		message = "%s is a %s, not a constant." % (qualified, representation)
		super().__init__(message + (" " + hint if hint else ""))
		self.qualified, self.representation = qualified, representation

class ContextMismatch(SymbolError):
	def __init__(self, what:str, want, count:Optional[int]=None):
		if count is None:
			message = "%s can only be evaluated in list context, not %s context." % (what, want.value)
		else:
			message = "%s produced %d values, which does not suit %s context." % (what, count, want.value)
		super().__init__(message)
		self.want, self.count = want, count

def _outburst():
	particle = ["Oh, ", "Well, ", "Hmm, ", "", ""]
	oaths = ['Drat', 'Rats', 'Nuts', 'Blast', 'Fiddlesticks', 'Good Grief', 'Crikey', 'Jeepers', 'Bother']
	resignations = [
		'That name leads nowhere.',
		'The table is not what you think.',
		'I cannot find my way from here.',
		'Something does not add up.',
	]
	return "%s%s! %s"%tuple(map(random.choice, (particle, oaths, resignations)))

class Pic:
	def __init__(self, intro:str, lines:list[str], footer=()):
		self._intro, self._lines, self._footer = intro, lines, footer
	def as_text(self):
		return '\n'.join([self._intro, "", *self._lines, *self._footer])

class Report:
	_issues : list[Pic]

	def __init__(self, *, verbose:int=0):
		self._verbose = verbose or 0   # Because None is incomparable.
		self._issues = []

	def ok(self): return not self._issues
	def sick(self): return bool(self._issues)

	def issue(self, it:Any):
		self._issues.append(it)

	def info(self, *args):
		if self._verbose:
			print(*args, file=sys.stderr)

	def failed(self, ex:SymbolError):
		""" Make an entry for a lookup that raised """
		if isinstance(ex, MalformedInput):
			art = illustration(ex.text, ex.column, ex.width, prefix="    |", caption=ex.reason)
			self.issue(Pic("I could not make sense of this name.", [art]))
		else:
			self.issue(Pic(str(ex), []))

	def broken_module(self, module_name:str, tbx:TracebackException):
		intro = "Attempting to import %s threw an exception." % module_name
		self.issue(Pic(intro, [''.join(tbx.format())]))

	def complain_to_console(self):
		""" Emit all the issues to the console. """
		if self._issues:
			print("*"*60, file=sys.stderr)
			print(_outburst(), file=sys.stderr)
		for i in self._issues:
			print("  -"*20, file=sys.stderr)
			print(i.as_text(), file=sys.stderr)
		sys.stderr.flush()
