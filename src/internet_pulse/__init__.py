"""Global Internet Pulse - internet health signal aggregation."""

__version__ = "0.1.0"
