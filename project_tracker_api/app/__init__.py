"""
Application package initializer.

The project is organised into layers: ``validators`` check incoming
payloads, ``data`` owns the in‑memory record set, ``services`` hold the
business rules (status lifecycle, soft delete) and ``api`` translates
HTTP requests into service calls.  Versioning of the HTTP surface is
handled by grouping routers under the ``api/<version>/`` hierarchy.
"""

from .main import app  # noqa: F401
