"""
Mock integration clients.

These return canned responses without calling BTCPay Server. They follow the
same Transport contract as clients/real_http/transport.py, so a resource client
cannot tell them apart.
"""

from .transport import MockResponse, MockTransport, RecordedCall

__all__ = ["MockResponse", "MockTransport", "RecordedCall"]
