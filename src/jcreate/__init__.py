"""jcreate: scaffold Java source files into an existing source tree."""

__version__ = "0.3.0"
