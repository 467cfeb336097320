"""Service setup."""
