"""Command-line interface for ctlv."""
