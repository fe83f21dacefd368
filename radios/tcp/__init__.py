# radios/tcp/__init__.py
"""
Network CAT sender package.
Exports:
- TcpSender
"""

from .sender import TcpSender, REPLY_BUFFER_SIZE

__all__ = ["TcpSender", "REPLY_BUFFER_SIZE"]
