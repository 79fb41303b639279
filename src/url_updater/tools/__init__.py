"""Tool-specific URL updaters."""
