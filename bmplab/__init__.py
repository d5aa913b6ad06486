"""Reading, writing and simple processing of uncompressed 8-bit and 24-bit BMP images."""

__version__ = "0.1.0"