"""
Input source implementations.
"""

from dodgekit.games.input.sources.base import InputSource
from dodgekit.games.input.sources.pointer import PointerInputSource

__all__ = ['InputSource', 'PointerInputSource']
