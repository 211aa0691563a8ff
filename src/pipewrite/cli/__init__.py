"""
Initialize the CLI package. Contains the pipewrite command line entry point.
"""
