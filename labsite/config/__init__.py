"""Configuration for labsite."""
