"""Textual user interface for labsite."""
