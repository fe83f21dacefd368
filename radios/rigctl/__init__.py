# radios/rigctl/__init__.py
"""
Hamlib rigctl process sender package.
Exports:
- RigctlSender
- DEFAULT_MODEL
"""

from .sender import RigctlSender, DEFAULT_MODEL

__all__ = ["RigctlSender", "DEFAULT_MODEL"]
