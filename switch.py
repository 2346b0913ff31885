# switch.py
from __future__ import annotations

from collections.abc import Sequence

from debug import Debug

debug = Debug()
debug.disable("switch")


class WiringError(ValueError):
    """A permutation table that cannot drive a stepping switch."""


Table = tuple[tuple[int, ...], ...]


def invert(rows: Sequence[Sequence[int]]) -> Table:
    """Return the per-position inverse of a 0-based permutation table.

    For every position p and every (level, value) pair of row p the
    inverse row holds ``inverse[p][value] == level``.
    """
    inverse = []
    for row in rows:
        inv = [0] * len(row)
        for level, value in enumerate(row):
            inv[value] = level
        inverse.append(tuple(inv))
    return tuple(inverse)


class Wiring:
    """Immutable decipher wiring of one switch plus its encipher inverse.

    ``rows`` holds one permutation per switch position. Published PURPLE
    tables count levels from 1, so ``base=1`` shifts them down on load.
    A Wiring holds no position, so one instance can back any number of
    Switch objects.
    """

    __slots__ = ("nlevels", "npositions", "decipher_rows", "encipher_rows")

    def __init__(self, rows: Sequence[Sequence[int]], *, base: int = 0) -> None:
        if not rows:
            raise WiringError("wiring must have at least one position")

        nlevels = len(rows[0])
        expected = list(range(nlevels))
        table = []
        for pos, row in enumerate(rows):
            if len(row) != nlevels:
                raise WiringError(
                    f"all rows must be the same length, got {len(row)} "
                    f"in position {pos}, want {nlevels}"
                )
            shifted = tuple(level - base for level in row)
            if sorted(shifted) != expected:
                raise WiringError(
                    f"row {pos} is not a permutation of levels {base}-{nlevels - 1 + base}"
                )
            table.append(shifted)

        self.nlevels: int = nlevels
        self.npositions: int = len(table)
        self.decipher_rows: Table = tuple(table)
        self.encipher_rows: Table = invert(self.decipher_rows)

    def __repr__(self) -> str:
        return f"<Wiring {self.npositions}x{self.nlevels}>"


class Switch:
    """A stepping switch: a shared Wiring plus this switch's own position."""

    def __init__(
        self,
        wiring: Wiring | Sequence[Sequence[int]],
        position: int = 0,
        name: str = "",
    ) -> None:
        if not isinstance(wiring, Wiring):
            wiring = Wiring(wiring)

        self.wiring = wiring
        self.nlevels = wiring.nlevels
        self.npositions = wiring.npositions
        self.name = name
        self.position = 0
        self.set_position(position)

    # ── position helpers ──────────────────────────────────────────
    def set_position(self, position: int) -> "Switch":
        self.position = position % self.npositions
        return self

    def step(self) -> int:
        """Advance one position and return the new position."""
        self.position = (self.position + 1) % self.npositions
        debug.log("switch", f"{self.name or 'switch'} -> {self.position}")
        return self.position

    # ── signal paths ---------------------------------------------
    def decipher(self, level: int) -> int:
        return self.wiring.decipher_rows[self.position][level]

    def encipher(self, level: int) -> int:
        return self.wiring.encipher_rows[self.position][level]

    # ── niceties --------------------------------------------------
    def __repr__(self) -> str:
        label = f" {self.name}" if self.name else ""
        return f"<Switch{label} levels={self.nlevels} pos={self.position}>"
