"""Command line interface for rfc-uuid."""
