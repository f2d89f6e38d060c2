"""Application – data masking engine and its settings."""
