"""Data access layer.  Only this package mutates project records."""
