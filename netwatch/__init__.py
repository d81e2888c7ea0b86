"""Building blocks for a per-process network traffic monitor."""

__version__ = "0.1.0"

__all__ = ["capture", "jhash", "sort", "textutil", "timer", "translate", "usage"]