"""Layer 0 — digest expansion."""
