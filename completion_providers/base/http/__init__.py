"""HTTP utilities package for providers.

Exposes the httpx-backed streaming transport.
"""

from .client import HttpxStreamingTransport, extract_error_message

__all__ = ["HttpxStreamingTransport", "extract_error_message"]
