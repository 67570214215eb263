"""Front matter editing toolkit."""

__version__ = "0.1.0"
