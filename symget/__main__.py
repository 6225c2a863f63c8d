""" So that "python -m symget" works as well as the installed command. """
from .cmdline import main

main()
