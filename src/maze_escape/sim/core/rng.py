"""Seeded randomness for reproducible maze runs.

One master seed drives a whole run.  Every consumer draws from its own
named stream obtained with :meth:`GameRNG.fork`:

- ``"maze"`` and ``"placement"`` per level
- ``"loot"`` for chest rolls
- ``"agent"`` for the play agent's choices

Streams never share state, so an extra loot roll cannot change the shape
of the next maze.
"""

from __future__ import annotations

import hashlib
import random
from typing import Sequence, TypeVar

T = TypeVar("T")


class GameRNG:
    """A ``random.Random`` with a known seed and named sub-streams.

    Parameters
    ----------
    seed:
        Integer seed.  Two instances built from the same seed produce the
        same draws in the same order.
    """

    def __init__(self, seed: int) -> None:
        self._seed = seed
        self._rng = random.Random(seed)

    @property
    def seed(self) -> int:
        return self._seed

    # -- draws -----------------------------------------------------------------

    def random_int(self, low: int, high: int) -> int:
        """Uniform integer in ``[low, high]`` (both ends inclusive)."""
        return self._rng.randint(low, high)

    def random_float(self) -> float:
        """Uniform float in ``[0.0, 1.0)``."""
        return self._rng.random()

    def random_choice(self, seq: Sequence[T]) -> T:
        """Uniform pick from *seq*.  Raises ``ValueError`` if it is empty."""
        if not seq:
            raise ValueError("Cannot choose from an empty sequence")
        return self._rng.choice(seq)

    def chance(self, probability: float) -> bool:
        """One Bernoulli trial: ``True`` with *probability*.

        ``0.0`` never succeeds and ``1.0`` always does.
        """
        return self._rng.random() < probability

    def interior_cell(self, width: int, height: int) -> tuple[int, int]:
        """Draw ``(x, y)`` strictly inside a *width* x *height* border.

        ``x`` is drawn before ``y``.
        """
        x = self._rng.randint(1, width - 2)
        y = self._rng.randint(1, height - 2)
        return x, y

    # -- streams ---------------------------------------------------------------

    def fork(self, *path: str) -> GameRNG:
        """Child stream keyed by this seed and *path*.

        The child depends only on the seed and the path, never on how many
        draws the parent has made.  ``fork("attempt-2", "level-3")`` names
        the stream for level 3 of the second attempt.
        """
        key = ":".join((str(self._seed), *path))
        digest = hashlib.sha256(key.encode()).digest()
        return GameRNG(int.from_bytes(digest[:8], "big"))

    def __repr__(self) -> str:
        return f"GameRNG(seed={self._seed})"
