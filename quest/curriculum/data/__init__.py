"""Bundled sample curriculum."""
