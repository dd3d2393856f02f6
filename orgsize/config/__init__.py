"""Packaged default configuration for orgsize."""
