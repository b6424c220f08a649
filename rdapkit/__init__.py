"""RDAP bootstrap: Service Registry download, caching and lookup, with RDAP data types."""

__version__ = "0.1.0"