"""HTTP API for contextual-ai."""
