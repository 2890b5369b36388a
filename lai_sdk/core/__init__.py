"""Core layer: capability registry and selection policy."""
