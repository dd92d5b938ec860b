"""Driver for the BNO055 absolute orientation sensor over a pluggable bus."""

__version__ = "0.1.0"
__all__ = ["registers", "models", "device"]