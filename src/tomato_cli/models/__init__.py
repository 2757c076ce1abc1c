"""Domain models for the tomato CLI."""
