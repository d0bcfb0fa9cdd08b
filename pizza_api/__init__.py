"""
Top-level package for the Pizza Lookup API.

All functionality lives in submodules under ``app``.  Run
``python -m pizza_api <name>`` for a one-off lookup from the shell.
"""

__all__ = []
