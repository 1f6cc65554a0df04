"""Infrastructure layer - logging, database lifecycle and persistence adapters."""
