"""Taskpad - a local task list with a command line and a terminal UI."""

__version__ = "0.1.0"
