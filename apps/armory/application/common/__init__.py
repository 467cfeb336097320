"""Shared application components."""
