"""
errors.py

The single error type raised by go-cli modules. Callers distinguish failures by
message, not by kind.
"""

from __future__ import annotations


class ScaffoldError(RuntimeError):
    pass
