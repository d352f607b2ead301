"""Run two commands as a pipeline between an input file and an output file."""

__version__ = "0.1.0"