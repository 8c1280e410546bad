"""Legal Review - research relay and report renderer."""

__version__ = "1.0.0"
