"""Utility helpers for labsite."""
