"""Beer lookups from a CSV file, a fixed in-memory list or an HTTP products listing."""

__version__ = "0.1.0"