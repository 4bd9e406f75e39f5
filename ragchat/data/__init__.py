"""Bundled seed data."""
