"""Seeded pseudo-random stream threaded explicitly through the draft.

The generator is mulberry32 over a 32-bit state. Callers hold an ``RngState``
and get a fresh one back from every draw; there is no module-level generator.
"""

from __future__ import annotations

import hashlib
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fantasy_mock_draft.domain.settings import MockDraftSettings

_MASK32 = 0xFFFFFFFF
_INCREMENT = 0x6D2B79F5
_TWO_POW_32 = 4294967296


@dataclass(frozen=True)
class RngState:
    state: int
    draws: int = 0


def _imul(a: int, b: int) -> int:
    return (a * b) & _MASK32


def create_rng(seed: int) -> RngState:
    return RngState(state=(seed & _MASK32) or 1)


def next_value(rng: RngState) -> tuple[float, RngState]:
    """Return a value in [0, 1) and the advanced state."""
    state = (rng.state + _INCREMENT) & _MASK32
    t = _imul(state ^ (state >> 15), state | 1)
    t ^= (t + _imul(t ^ (t >> 7), t | 61)) & _MASK32
    value = ((t ^ (t >> 14)) & _MASK32) / _TWO_POW_32
    return value, RngState(state=state, draws=rng.draws + 1)


def next_index(rng: RngState, size: int) -> tuple[int, RngState]:
    if size <= 0:
        msg = "size must be positive"
        raise ValueError(msg)
    value, rng = next_value(rng)
    return min(size - 1, int(value * size)), rng


def _hash_seed(raw: str) -> int:
    digest = hashlib.sha256(raw.encode("utf-8")).digest()
    return int.from_bytes(digest[:4], "big", signed=False)


def derive_seed(settings: MockDraftSettings) -> int:
    """Resolve the 32-bit seed for a draft.

    An explicit seed is hashed with its type so ``42`` and ``"42"`` differ.
    Without one, the full settings tuple is hashed, so identical settings
    always reproduce the same draft.
    """
    seed = settings.seed
    if seed is None:
        raw = "|".join(
            (
                "settings",
                str(settings.teams),
                str(settings.rounds),
                str(settings.draft_slot),
                settings.scoring.value,
                settings.strategy.value,
            )
        )
    elif isinstance(seed, str):
        raw = f"str|{seed}"
    else:
        raw = f"int|{math.floor(seed)}"
    return _hash_seed(raw)
