"""
connect4_engine.interfaces - User interfaces for the Connect Four engine

This package contains the front ends that drive the engine, currently the
command-line interface.
"""

# Don't import anything here to avoid circular imports
__all__ = []
