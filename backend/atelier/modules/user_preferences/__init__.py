"""Free-text style preferences (colours, styles, materials) per user."""
