"""
pagegen/generators/base.py
What the regenerator needs from a content source: one async call that
returns page text or raises GenerationError. No retries at this layer.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class ContentGenerator(Protocol):
    async def generate(self) -> str:
        ...
