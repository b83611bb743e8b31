"""Jikko - personal developer-automation commands behind a single CLI.

Commands live under `jikko.handlers` and register themselves on import.
The router maps the command line to one of them, e.g. `jikko git status`.
"""
