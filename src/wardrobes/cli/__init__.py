"""Command line interface for wardrobe pricing."""
