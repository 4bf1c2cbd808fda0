"""
cfgscan Command-Line Interface
==============================

- **cfglex**: Print the token stream of a notation source file

The tool is implemented as a Click-based CLI application.
"""

__all__ = ["cfglex"]
