"""Command-line interface for leb128codec."""
