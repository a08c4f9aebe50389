"""Layer 2 — mirrored grid construction."""
