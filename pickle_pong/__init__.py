"""
Pickle Pong: a two-player Cat vs Dog pong game
"""

__version__ = "0.1.0"
