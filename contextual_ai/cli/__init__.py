"""Command line interface for contextual-ai."""
