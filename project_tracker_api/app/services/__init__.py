"""
Service layer abstraction.

Each service encapsulates business logic for a domain and talks to
storage only through a store object, so the in‑memory store used here
can be swapped for a database without changing API handlers.
"""
