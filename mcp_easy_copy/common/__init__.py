"""Common helpers for the server modules."""

from .progress import log, print_error, print_ok, print_warn

__all__ = [
    'log',
    'print_ok',
    'print_warn',
    'print_error',
]
