"""jikko itself."""
