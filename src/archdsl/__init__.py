"""
archdsl - include resolution for architecture-as-code DSL sources

Expands ``!include <file|directory|url>`` directives into ordered,
origin-tagged line sequences for the DSL reader.
"""

__version__ = "1.0.0"
__all__ = ["__version__"]
