"""
API package containing versioned routes and the HTTP error mapping.

A version subpackage (``v1``) exposes a top‑level ``router`` which
includes all of its endpoints.  ``errors`` translates application
errors into HTTP responses.
"""
