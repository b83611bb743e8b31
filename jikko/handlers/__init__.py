"""Built-in jikko commands.

Each module registers its handler with `jikko.commands.registry.command`;
the module layout mirrors the command paths (`git/status.py` is `jikko git status`).
"""
