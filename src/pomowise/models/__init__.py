"""Domain models for Pomowise."""
