"""Query building, HTTP requests and response decoding for the Small-Body Database Query API."""

__version__ = "0.1.0"
__all__ = ["client", "decode", "logger", "model", "query"]