"""Core definitions shared across dashnav."""
