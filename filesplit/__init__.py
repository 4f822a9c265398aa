"""Split files into fixed-size parts and join them back together."""

__version__ = "0.1.0"
