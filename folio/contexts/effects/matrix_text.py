"""
Matrix Text Effect

Progressively reveals a string so each character appears to resolve from
random placeholder glyphs into its final value, one position at a time.

Two layers:
- MatrixText: a pure, lazy frame sequence (no clocks, no I/O). Used directly
  by the HTML generator (reveal schedule) and by tests.
- MatrixTextAnimation: plays a MatrixText on an asyncio event loop, one timer
  at a time, and cancels that timer on disposal.

Timing: every character takes `delay_ms` to resolve. Within that window the
active position is re-scrambled every `glyph_interval_ms`, so each position
produces `delay_ms // glyph_interval_ms` frames (at least one), the last of
which shows the final character.
"""

import asyncio
import random
from dataclasses import dataclass
from typing import Callable, Iterator, List, Optional

DEFAULT_GLYPHS = "ｱｲｳｴｵｶｷｸｹｺｻｼｽｾｿﾀﾁﾂﾃﾄ0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ@#$%&*+=<>?"
DEFAULT_DELAY_MS = 800
DEFAULT_GLYPH_INTERVAL_MS = 50


@dataclass(frozen=True)
class Frame:
    """
    One display state of the effect.

    Attributes:
        position: Index of the character being resolved in this frame
        text: Full display string (resolved prefix, active glyph, placeholders)
        resolved: True when `position` shows its final character
    """

    position: int
    text: str
    resolved: bool


@dataclass(frozen=True)
class RevealStep:
    """When a single character settles on its final value, relative to start."""

    position: int
    char: str
    resolve_at_ms: int


class MatrixText:
    """
    Lazy frame sequence for the text-reveal effect.

    Example:
        >>> effect = MatrixText("AB", delay_ms=100, glyph_interval_ms=50, rng=random.Random(0))
        >>> [f.resolved for f in effect.frames()]
        [False, True, False, True]
        >>> list(effect.frames())[-1].text
        'AB'
    """

    def __init__(
        self,
        text: str,
        delay_ms: int = DEFAULT_DELAY_MS,
        glyph_interval_ms: int = DEFAULT_GLYPH_INTERVAL_MS,
        glyphs: str = DEFAULT_GLYPHS,
        placeholder: str = " ",
        rng: Optional[random.Random] = None,
    ):
        """
        Args:
            text: Target string
            delay_ms: Time between character resolutions (must be positive)
            glyph_interval_ms: Time between glyph changes at the active position (must be positive)
            glyphs: Alphabet of placeholder glyphs (must be non-empty)
            placeholder: Single character shown at positions not yet reached
            rng: Random source; pass a seeded random.Random for reproducible frames

        Raises:
            ValueError: If a timing value is not positive, glyphs is empty, or
                placeholder is not a single character
        """
        if delay_ms <= 0:
            raise ValueError(f"delay_ms must be positive, got {delay_ms}")
        if glyph_interval_ms <= 0:
            raise ValueError(f"glyph_interval_ms must be positive, got {glyph_interval_ms}")
        if not glyphs:
            raise ValueError("glyphs must contain at least one character")
        if len(placeholder) != 1:
            raise ValueError(f"placeholder must be a single character, got {placeholder!r}")

        self.text = text
        self.delay_ms = delay_ms
        self.glyph_interval_ms = glyph_interval_ms
        self.glyphs = glyphs
        self.placeholder = placeholder
        self.rng = rng or random.Random()

    @property
    def steps_per_char(self) -> int:
        """Frames produced per character (scrambles plus the final resolve)."""
        return max(1, self.delay_ms // self.glyph_interval_ms)

    @property
    def tick_ms(self) -> float:
        """Time between consecutive frames."""
        return self.delay_ms / self.steps_per_char

    @property
    def initial_text(self) -> str:
        """Display string before the first frame."""
        return self.placeholder * len(self.text)

    def __len__(self) -> int:
        """Total number of frames."""
        return len(self.text) * self.steps_per_char

    def _random_glyph(self, final_char: str) -> str:
        # Never show the final character early, so only the resolving frame carries it
        pool = [g for g in self.glyphs if g != final_char] or list(self.glyphs)
        return self.rng.choice(pool)

    def frames(self) -> Iterator[Frame]:
        """
        Yield frames lazily, in display order.

        At frames for position k: positions < k show their final value,
        position k shows a random glyph (or its final value on the last frame
        for k), positions > k show the placeholder. An empty string yields
        nothing.
        """
        n = len(self.text)
        for k, final_char in enumerate(self.text):
            resolved_prefix = self.text[:k]
            pending_suffix = self.placeholder * (n - k - 1)

            for _ in range(self.steps_per_char - 1):
                glyph = self._random_glyph(final_char)
                yield Frame(position=k, text=resolved_prefix + glyph + pending_suffix, resolved=False)

            yield Frame(position=k, text=self.text[: k + 1] + pending_suffix, resolved=True)

    def reveal_schedule(self) -> List[RevealStep]:
        """Resolve time of every character, in position order."""
        return [
            RevealStep(position=k, char=char, resolve_at_ms=(k + 1) * self.delay_ms)
            for k, char in enumerate(self.text)
        ]


class MatrixTextAnimation:
    """
    Plays a MatrixText on the running asyncio event loop.

    At most one timer is pending at any time. The timer is released when the
    animation completes, when dispose() is called, or when a context manager
    block exits, whichever comes first; after that no frame callback runs.

    Example:
        async def main():
            effect = MatrixText("$juan-d-khusuma", delay_ms=800)
            async with MatrixTextAnimation(effect, on_frame=print) as animation:
                final = await animation.wait()
    """

    def __init__(
        self,
        effect: MatrixText,
        on_frame: Optional[Callable[[Frame], None]] = None,
        loop: Optional[asyncio.AbstractEventLoop] = None,
    ):
        self.effect = effect
        self.on_frame = on_frame
        self.text = effect.initial_text
        self.frame_count = 0
        self.finished = False
        self.disposed = False

        self._loop = loop
        self._frames: Optional[Iterator[Frame]] = None
        self._handle: Optional[asyncio.TimerHandle] = None
        self._done: Optional[asyncio.Future] = None

    @property
    def started(self) -> bool:
        return self._done is not None

    @property
    def has_pending_timer(self) -> bool:
        return self._handle is not None

    def start(self) -> "MatrixTextAnimation":
        """
        Schedule the first frame.

        Must be called with a running event loop (or with `loop` passed to the
        constructor). An empty target finishes immediately without scheduling
        any timer.

        Raises:
            RuntimeError: If already started or disposed
        """
        if self.disposed:
            raise RuntimeError("Animation has been disposed")
        if self.started:
            raise RuntimeError("Animation already started")

        if self._loop is None:
            self._loop = asyncio.get_running_loop()
        self._done = self._loop.create_future()
        self._frames = self.effect.frames()

        if len(self.effect) == 0:
            self._finish()
            return self

        self._schedule_next()
        return self

    def _schedule_next(self) -> None:
        self._handle = self._loop.call_later(self.effect.tick_ms / 1000, self._tick)

    def _tick(self) -> None:
        self._handle = None
        if self.disposed:
            return

        frame = next(self._frames, None)
        if frame is None:
            self._finish()
            return

        self.text = frame.text
        self.frame_count += 1

        if self.on_frame is not None:
            try:
                self.on_frame(frame)
            except Exception as e:
                # Surface callback failures through wait() and stop scheduling
                self._release()
                if not self._done.done():
                    self._done.set_exception(e)
                return

        if frame.resolved and frame.position == len(self.effect.text) - 1:
            self._finish()
        else:
            self._schedule_next()

    def _finish(self) -> None:
        self.finished = True
        self._release()
        if self._done is not None and not self._done.done():
            self._done.set_result(self.text)

    def _release(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
        self._frames = None

    def dispose(self) -> None:
        """Cancel any pending timer. Safe to call more than once."""
        if self.disposed:
            return
        self.disposed = True
        self._release()
        if self._done is not None and not self._done.done():
            self._done.set_result(self.text)

    async def wait(self) -> str:
        """
        Wait until the animation finishes or is disposed.

        Returns:
            The display text at that moment (the full target when finished)

        Raises:
            RuntimeError: If the animation was never started
        """
        if self._done is None:
            raise RuntimeError("Animation not started")
        return await self._done

    def __enter__(self) -> "MatrixTextAnimation":
        return self.start()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.dispose()

    async def __aenter__(self) -> "MatrixTextAnimation":
        return self.start()

    async def __aexit__(self, exc_type, exc, tb) -> None:
        self.dispose()


async def play(
    text: str,
    delay_ms: int = DEFAULT_DELAY_MS,
    glyph_interval_ms: int = DEFAULT_GLYPH_INTERVAL_MS,
    on_frame: Optional[Callable[[Frame], None]] = None,
    rng: Optional[random.Random] = None,
) -> str:
    """Play the effect to completion and return the final text."""
    effect = MatrixText(text, delay_ms=delay_ms, glyph_interval_ms=glyph_interval_ms, rng=rng)
    async with MatrixTextAnimation(effect, on_frame=on_frame) as animation:
        return await animation.wait()
