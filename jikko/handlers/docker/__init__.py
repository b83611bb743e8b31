"""docker listings."""
