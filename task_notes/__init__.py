"""Task Notes API: a small REST service for task notes."""

__version__ = "1.0.0"
