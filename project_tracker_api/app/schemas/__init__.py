"""
Pydantic schema definitions for API payloads.

Schemas describe what leaves the service: project records and the
success/error envelopes wrapped around them.  Incoming payloads are
checked by ``validators`` so that every problem can be reported at once.
"""
