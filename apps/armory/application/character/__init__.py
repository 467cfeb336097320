"""Character read/write use cases."""
