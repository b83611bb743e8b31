"""git shortcuts."""
