"""Building blocks for generating typed data-access code: clauses, field options, imports and file output."""

__version__ = "0.1.0"
__all__ = [
    "clause",
    "objects",
    "imports",
    "field_options",
    "geninfo",
    "generator",
]