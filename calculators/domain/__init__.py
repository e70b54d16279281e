"""Errors and caller-side input handling."""
