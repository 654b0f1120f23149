"""Top-level archdsl commands (auto-discovered)."""
