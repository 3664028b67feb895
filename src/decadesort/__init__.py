"""Sort an exported music library into a decade-grouped CSV report."""

__version__ = "0.1.0"
