"""Adapters implementing the core ports (cache, filesystem, readers)."""
