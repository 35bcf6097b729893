"""rookie: a standard-chess rules engine with a remote move-advisor client."""

__version__ = "0.1.0"
