"""
Business entities representing core domain concepts.

Entities are mutable objects with identity that persist over time.
They encapsulate business rules and behavior.

Exports:
- MediaItem: A media folder found on disk with its parsed identity
"""

from src.core.entities.media import MediaItem

__all__ = [
    "MediaItem",
]
