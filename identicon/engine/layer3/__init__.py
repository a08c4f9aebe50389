"""Layer 3 — cell filtering."""
