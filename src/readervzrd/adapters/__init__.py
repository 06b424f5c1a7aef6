"""Adapters binding the core ports to concrete parsing libraries."""
