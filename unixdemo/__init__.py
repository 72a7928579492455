"""Runnable demonstrations of UNIX error, identity, resource, directory, process and file I/O calls."""

__version__ = "0.1.0"