"""Fixed names, limits, and display constants."""
