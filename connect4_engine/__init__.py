"""
connect4_engine - Game-state engine for two-player Connect Four

This package provides the grid model, move legality, win/tie detection and
turn-state transitions of Connect Four, plus a terminal interface and a
gymnasium environment that drive the engine.
"""

# Version number
__version__ = '0.1.0'
