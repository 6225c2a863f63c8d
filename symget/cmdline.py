"""
Read the symbol tables of Python modules by name.

{0}

For example:

    symget -m json -m json.decoder '&json.decoder.JSONDecoder'

prints the callable bound to that name, and

    symget -m re --copy IGNORECASE

copies out a constant. Names take a kind marker ($ @ % &) unless they
name a constant. With --list, the name is a namespace to enumerate.

    symget -h

will explain all the arguments.
"""
import sys, argparse
from traceback import TracebackException

parser = argparse.ArgumentParser(
	prog="symget",
	description="Look up a name in the symbol tables of Python modules.",
)
parser.add_argument("name", help="like '$pkg.mod.value', or 'pkg.mod.CONSTANT', or a namespace with --list.")
parser.add_argument('-m', "--module", action="append", default=[], help="mirror this module first (repeatable).")
parser.add_argument('-n', "--namespace", help="the caller's namespace, for names without one. Default: the first module.")
parser.add_argument('-p', "--private", action="store_true", help="include underscored names.")
mode = parser.add_mutually_exclusive_group()
mode.add_argument('-c', "--copy", action="store_true", help="copy out the values of a constant, whatever its form.")
mode.add_argument('-l', "--list", action="store_true", help="list the names bound in a namespace.")
parser.add_argument('-v', "--verbose", action="count", help="say what is going on.")

def run(args):
	from .adapters.python_modules import Mirror
	from .diagnostics import Report, SymbolError
	from .introspect import Introspector
	from .ontology import Want
	from .space import NamespaceNode
	report = Report(verbose=args.verbose)
	root = NamespaceNode()
	if args.namespace is not None: caller = args.namespace
	elif args.module: caller = args.module[0]
	else: caller = ""
	mirror = Mirror(root, private=args.private)
	try:
		for module_name in args.module:
			report.info("Mirroring", module_name)
			try: mirror.mirror_module(module_name)
			except SymbolError: raise
			except Exception as ex:
				report.broken_module(module_name, TracebackException.from_exception(ex))
				report.complain_to_console()
				return 1
		introspector = Introspector(root)
		report.info("Caller namespace is", repr(caller))
		if args.list:
			for name in sorted(introspector.list_names(args.name, caller=caller)):
				print(name)
		elif args.copy:
			for value in introspector.copy_constant(args.name, caller=caller, want=Want.LIST):
				print(repr(value))
		else:
			print(repr(introspector.get(args.name, caller=caller)))
	except SymbolError as ex:
		report.failed(ex)
		report.complain_to_console()
		return 1
	return 0

def main():
	if len(sys.argv) > 1:
		sys.exit(run(parser.parse_args()))
	else:
		print(__doc__.strip().format(parser.format_usage()))
