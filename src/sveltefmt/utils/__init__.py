"""Utility modules for sveltefmt."""
