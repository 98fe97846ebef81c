"""Safety monitoring core: errors and logging, records, notifications and detection post-processing."""

__version__ = "0.1.0"