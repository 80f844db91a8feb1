"""Command-line interface for SizeScan."""
