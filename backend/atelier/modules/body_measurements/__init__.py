"""Per-user body measurements (height, weight and girths)."""
