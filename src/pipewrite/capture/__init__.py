"""
Capture system for copying standard input into files.

This package provides the read, write and measure steps used by the CLI,
along with the result model and the errors each step can raise.
"""
