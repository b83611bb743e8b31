"""Command routing for jikko.

This package provides:
- naming: Handler identifiers derived from command paths
- parsing: Docstring parsing for help output
- registry: The handler registry and the `command` decorator
- router: Mapping of the command line to a registered handler
"""
