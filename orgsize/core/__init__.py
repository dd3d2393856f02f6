"""Reporting pipeline components."""
