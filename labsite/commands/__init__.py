"""CLI command groups for labsite."""
