"""Armory tests."""
