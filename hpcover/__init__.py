"""Heat pump cover generator: parts library configuration, cover generation, input validation and supporting tools."""

__version__ = "0.1.0"