"""Scaffolding of new jikko commands."""
