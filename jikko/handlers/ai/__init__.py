"""AI tooling."""
