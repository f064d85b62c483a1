"""backend: HTTP surface for the packing wizard."""
