"""Copies to other machines."""
