"""Library reservation queue and event notification service."""

__version__ = "0.1.0"
