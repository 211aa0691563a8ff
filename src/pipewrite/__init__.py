"""
pipewrite: copy standard input into a named file.
"""

__version__ = "0.1.0"
