"""TestPoint - locate the Ruby test at a cursor and build the command that runs it."""

__version__ = "0.1.0"
