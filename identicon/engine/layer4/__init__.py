"""Layer 4 — pixel mapping and rasterization."""
