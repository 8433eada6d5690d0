"""
bitconnect.interfaces - User interfaces for the Connect Four engine
"""

# Don't import anything here to avoid circular imports
__all__ = []
