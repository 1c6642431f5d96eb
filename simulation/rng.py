"""
Seedable random stream shared by every probabilistic decision in the engine.

All draws go through one RandomOutcomeProvider so replaying the same intents from
the same saved state reproduces identical results. ``cursor`` counts draws; the
full Mersenne Twister state travels in the save so a restored game continues
the exact same stream.
"""
from __future__ import annotations

import random
from typing import Any, Dict, Sequence, TypeVar

T = TypeVar("T")


class RandomOutcomeProvider:
    def __init__(self, seed: int | None = None) -> None:
        if seed is None:
            seed = random.SystemRandom().randint(0, 2**31 - 1)
        self.seed = seed
        self.cursor = 0
        self._random = random.Random(seed)

    # --- draws ---

    def random(self) -> float:
        self.cursor += 1
        return self._random.random()

    def chance(self, probability: float) -> bool:
        return self.random() < probability

    def randint(self, a: int, b: int) -> int:
        self.cursor += 1
        return self._random.randint(a, b)

    def uniform(self, a: float, b: float) -> float:
        self.cursor += 1
        return self._random.uniform(a, b)

    def gauss(self, mu: float, sigma: float) -> float:
        self.cursor += 1
        return self._random.gauss(mu, sigma)

    def choice(self, seq: Sequence[T]) -> T:
        self.cursor += 1
        return self._random.choice(seq)

    def shuffle(self, items: list) -> None:
        self.cursor += 1
        self._random.shuffle(items)

    def sample(self, population: Sequence[T], k: int) -> list[T]:
        self.cursor += 1
        return self._random.sample(population, k)

    # --- persistence ---

    def to_dict(self) -> Dict[str, Any]:
        version, internal, gauss_next = self._random.getstate()
        return {
            "seed": self.seed,
            "cursor": self.cursor,
            "state": [version, list(internal), gauss_next],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RandomOutcomeProvider":
        provider = cls(seed=data["seed"])
        provider.cursor = int(data["cursor"])
        version, internal, gauss_next = data["state"]
        provider._random.setstate((version, tuple(internal), gauss_next))
        return provider

    def __repr__(self) -> str:
        return f"RandomOutcomeProvider(seed={self.seed}, cursor={self.cursor})"
