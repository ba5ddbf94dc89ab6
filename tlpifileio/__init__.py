"""File I/O tools for copying, seeking and non-blocking reads on file descriptors."""

__version__ = "0.1.0"