"""laraboot - Laravel project setup assistant."""

__version__ = "1.0.0"
