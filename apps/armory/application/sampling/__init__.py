"""Random character sampling use cases."""
