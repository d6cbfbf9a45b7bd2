"""py-shfuncs: shell script helper functions usable from Python and the command line."""

__version__ = "0.1.0"
