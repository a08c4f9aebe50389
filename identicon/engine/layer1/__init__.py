"""Layer 1 — color selection."""
