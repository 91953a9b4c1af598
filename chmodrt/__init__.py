"""Recursively change the mode of directories or files.

Numeric modes must be an octal between one and four digits. Symbolic modes are not supported.
"""

__version__ = "0.4.0"
