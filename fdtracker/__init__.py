"""Track open file descriptors and close them in groups (see fdtracker.tracker)."""

__version__ = "0.1.0"
__all__ = ["tracker"]