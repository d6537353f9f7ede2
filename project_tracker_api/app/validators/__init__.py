"""Pure input checks for incoming payloads (no I/O, no mutation)."""
