"""Core library for archdsl (no CLI dependencies)."""
