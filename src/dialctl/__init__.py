"""dialctl — rotary dial simulator with zero-crossing accounting."""

__version__ = "0.1.0"
