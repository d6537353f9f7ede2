"""Cross‑cutting infrastructure: settings, logging and error types."""
