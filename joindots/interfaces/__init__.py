"""
joindots.interfaces - User interfaces for Join Dots

Front ends that drive a GameSession and render what it reports.
"""

# Don't import anything here to avoid circular imports
__all__ = []
