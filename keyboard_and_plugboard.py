# keyboard_and_plugboard.py
from __future__ import annotations

import string
from collections import Counter

from debug import Debug

debug = Debug()
debug.disable("keyboard", "plugboard")

ALPHA26 = string.ascii_uppercase


class AlphabetError(ValueError):
    """The daily alphabet is not a permutation of A-Z."""


# ── Keyboard ──────────────────────────────────────────────────────
class Keyboard:
    """Typewriter side: A-Z (either case) to key index 0-25 and back."""

    def __init__(self, alphabet: str = ALPHA26) -> None:
        self.alphabet: str = alphabet
        self.alpha_to_index: dict[str, int] = {
            ch: i for i, ch in enumerate(alphabet)
        }

    def is_key(self, ch: str) -> bool:
        return ch.isascii() and ch.upper() in self.alpha_to_index

    # letter → integer signal
    def forward(self, letter: str) -> int:
        try:
            signal = self.alpha_to_index[letter.upper()]
        except KeyError:
            raise ValueError(
                f"Invalid character {letter!r} for current alphabet."
            )
        debug.log("keyboard", f"{letter}->{signal}")
        return signal

    # integer signal → letter, in the case of `like`
    def backward(self, signal: int, like: str = "A") -> str:
        if not (0 <= signal < len(self.alphabet)):
            hi = len(self.alphabet) - 1
            raise ValueError(f"Signal {signal} out of range 0–{hi}")
        letter = self.alphabet[signal]
        return letter.lower() if like.islower() else letter


# ── Plugboard ─────────────────────────────────────────────────────
def validate_alphabet(alphabet: str) -> str:
    """Return *alphabet* upper-cased, or raise AlphabetError.

    The alphabet must hold every letter A-Z exactly once.
    """
    if len(alphabet) != len(ALPHA26):
        raise AlphabetError(
            f"alphabet length={len(alphabet)}, should be {len(ALPHA26)}"
        )
    alphabet = alphabet.upper()

    count = Counter(alphabet)
    strays = sorted(set(count) - set(ALPHA26))
    if strays:
        raise AlphabetError(f"alphabet contains non-letters {''.join(strays)!r}")
    for ch in ALPHA26:
        if count[ch] != 1:
            raise AlphabetError(f"alphabet contains {count[ch]} {ch!r}, should be 1")
    return alphabet


class Plugboard:
    """Daily alphabet wiring between the typewriters and the switches.

    Position i of the alphabet is wired to canonical level i: the first
    six letters feed the sixes switch, the other twenty the twenties chain.
    """

    def __init__(self, alphabet: str = ALPHA26) -> None:
        self.alphabet: str = validate_alphabet(alphabet)
        self._in: list[int] = [0] * len(ALPHA26)
        self._out: list[int] = [0] * len(ALPHA26)
        for level, ch in enumerate(self.alphabet):
            key = ALPHA26.index(ch)
            self._in[key] = level
            self._out[level] = key

    # key index → canonical level
    def forward(self, signal: int) -> int:
        level = self._in[signal]
        debug.log("plugboard", f"in {ALPHA26[signal]}->{level}")
        return level

    # canonical level → key index
    def backward(self, level: int) -> int:
        signal = self._out[level]
        debug.log("plugboard", f"out {level}->{ALPHA26[signal]}")
        return signal

    # nicety for debugging
    def __repr__(self) -> str:
        return f"<Plugboard {self.alphabet[:6]}-{self.alphabet[6:]}>"
