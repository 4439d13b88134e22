"""Domain models, protocols and errors."""
