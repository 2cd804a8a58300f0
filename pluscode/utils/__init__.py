"""Helpers layered on top of the codec."""
