"""Parse simple stylesheets into rule-to-style mappings and check style values."""

__version__ = "0.1.0"
__all__ = ["parser", "styles"]