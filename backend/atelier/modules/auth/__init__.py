"""Password login issuing bearer tokens."""
