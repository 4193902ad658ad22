"""Textual presentation layer."""
