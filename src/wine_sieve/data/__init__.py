"""Packaged sample catalog."""
