"""Console task manager backed by a remote /tasks HTTP API."""

__version__ = "0.1.0"
