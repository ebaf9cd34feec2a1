"""
Effects Context

Responsibilities:
- Text-reveal ("matrix") effect: lazy frame sequence and reveal schedule
- Timer-driven playback on asyncio with guaranteed timer release

Owns: Effect timing and frame generation
Never: Reads the site config
"""

from folio.contexts.effects.matrix_text import (
    Frame,
    MatrixText,
    MatrixTextAnimation,
    RevealStep,
    play,
)

__all__ = ["Frame", "MatrixText", "MatrixTextAnimation", "RevealStep", "play"]
