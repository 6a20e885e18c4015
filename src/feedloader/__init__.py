"""feedloader - load a remote item feed into validated domain objects."""

__version__ = "0.1.0"
