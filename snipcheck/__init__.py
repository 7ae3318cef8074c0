"""Find NetScaler servers that fall outside every declared SNIP subnet."""

__version__ = "0.1.0"
