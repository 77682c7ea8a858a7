"""Clone and update git repositories in a local cache."""

__version__ = "0.1.0"
