"""Template JSON files."""
