from __future__ import annotations

import random


def derive_rng(parent: random.Random, name: str) -> random.Random:
    """Return an independent random source for one named component.

    Draws made by one derived source never shift the sequence of another,
    so disabling a component leaves the rest of a seeded run unchanged.
    """
    return random.Random(f"{name}:{parent.getrandbits(64)}")
