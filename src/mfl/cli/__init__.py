"""
MFL Command-Line Interface
==========================

This package provides the ``mfl`` command-line tool: an interactive token
printer and a file mode driver for the MFL lexer.

The tool is implemented as a Click-based CLI application with
comprehensive help and error reporting.
"""

__all__ = ["main"]
