"""High-level document workflows used by the CLI."""
