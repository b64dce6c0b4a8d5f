"""
jsondrop: append timestamped JSON payloads to one stored document and read it back.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
