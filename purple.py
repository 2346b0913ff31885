# purple.py  ───────────────────────────────────────────────────────
"""The PURPLE machine (Cipher Machine 97).

A letter typed on the keyboard goes through the plugboard to one of 26
levels. Levels 0-5 pass through the sixes switch; levels 6-25 pass
through the three twenties switches wired in series. The result goes
back through the plugboard to a printed letter, and then the switches
step: the sixes on every letter plus exactly one twenties switch.

A Purple instance holds mutable switch positions and must not be shared
between threads; give each message stream its own machine.
"""
from __future__ import annotations

import switch_data
from debug import Debug
from keyboard_and_plugboard import ALPHA26, AlphabetError, Keyboard, Plugboard
from switch import Switch, WiringError
from utilities import GARBLE, KeyFormatError, format_key, parse_key

debug = Debug()
debug.disable("stepping", "encipher", "decipher", "key")

NPOSITIONS = 25
NSIXES = 6

FAST, MIDDLE, SLOW = range(3)


class ConfigError(ValueError):
    """Switch positions or switch roles out of range."""


def _check_position(pos: int, what: str) -> int:
    if not 1 <= pos <= NPOSITIONS:
        raise ConfigError(f"{what} position {pos} should be in range 1-{NPOSITIONS}")
    return pos - 1


class Purple:
    def __init__(
        self,
        sixes: int = 1,
        twenties: tuple[int, int, int] = (1, 1, 1),
        fast: int = 1,
        middle: int = 2,
        alphabet: str = ALPHA26,
    ) -> None:
        """Build a machine from 1-based settings.

        sixes, twenties: starting positions (1-25) of the sixes switch and of
        twenties switches #1, #2, #3.
        fast, middle: which twenties switch (1-3) takes each role; the slow
        switch is the one left over.
        alphabet: the daily 26-letter plugboard alphabet.
        """
        if len(twenties) != 3:
            raise ConfigError(f"need 3 twenties positions, got {len(twenties)}")
        start = (
            _check_position(sixes, "sixes"),
            *(_check_position(p, f"twenties #{i}") for i, p in enumerate(twenties, 1)),
        )

        if not 1 <= fast <= 3:
            raise ConfigError(f"fast = {fast}, must be in [1,3]")
        if not 1 <= middle <= 3:
            raise ConfigError(f"middle = {middle}, must be in [1,3]")
        if fast == middle:
            raise ConfigError(f"fast and middle ({fast}, {middle}) must be different")

        self.kb = Keyboard()
        self.pb = Plugboard(alphabet)

        self.sixes = Switch(switch_data.SIXES, name="sixes")
        self.twenties: tuple[Switch, Switch, Switch] = tuple(
            Switch(wiring, name=f"twenties{i}")
            for i, wiring in enumerate(switch_data.TWENTIES, 1)
        )
        slow = ({1, 2, 3} - {fast, middle}).pop()
        # slot index of the switch holding each role, indexed by FAST/MIDDLE/SLOW
        self.roles: tuple[int, int, int] = (fast - 1, middle - 1, slow - 1)

        self._start = start
        self._settings = (sixes, tuple(twenties), fast, middle)
        self.reset()

    @classmethod
    def from_key(cls, key: str, alphabet: str = ALPHA26) -> "Purple":
        """Build a machine from a key such as ``9-1,24,6-23``."""
        sixes, twenties, fast, middle = parse_key(key)
        debug.log("key", f"{key!r} -> sixes={sixes} twenties={twenties} fast={fast} middle={middle}")
        return cls(sixes, twenties, fast, middle, alphabet)

    # ── settings ─────────────────────────────────────────────────

    @property
    def alphabet(self) -> str:
        return self.pb.alphabet

    @property
    def key(self) -> str:
        """The starting settings as a key string."""
        return format_key(*self._settings)

    @property
    def fast(self) -> Switch:
        return self.twenties[self.roles[FAST]]

    @property
    def middle(self) -> Switch:
        return self.twenties[self.roles[MIDDLE]]

    @property
    def slow(self) -> Switch:
        return self.twenties[self.roles[SLOW]]

    def reset(self) -> None:
        """Put every switch back where the settings started it."""
        self.sixes.set_position(self._start[0])
        for sw, pos in zip(self.twenties, self._start[1:]):
            sw.set_position(pos)

    def positions(self) -> tuple[int, int, int, int]:
        """0-based (sixes, fast, middle, slow) positions."""
        return (
            self.sixes.position,
            self.fast.position,
            self.middle.position,
            self.slow.position,
        )

    # ── stepping logic  ─────────────────────────────────────────

    def step(self) -> None:
        """Advance the sixes and exactly one twenties switch.

        The sixes position is read before it moves. The slow switch steps
        when the middle is at 24 and the sixes at 23, the middle steps when
        the sixes is at 24, and otherwise the fast switch steps.
        """
        middle = self.middle
        if middle.position == NPOSITIONS - 1 and self.sixes.position == NPOSITIONS - 2:
            self.slow.step()
        elif self.sixes.position == NPOSITIONS - 1:
            middle.step()
        else:
            self.fast.step()
        self.sixes.step()
        debug.log("stepping", f"positions {self.positions()}")

    # ── one letter, no stepping  ────────────────────────────────

    def decipher(self, signal: int) -> int:
        """Cipher key index -> plain key index."""
        n = self.pb.forward(signal)
        if n < NSIXES:
            p = self.sixes.decipher(n)
        else:
            tw1, tw2, tw3 = self.twenties
            p = NSIXES + tw1.decipher(tw2.decipher(tw3.decipher(n - NSIXES)))
        return self.pb.backward(p)

    def encipher(self, signal: int) -> int:
        """Plain key index -> cipher key index."""
        n = self.pb.forward(signal)
        if n < NSIXES:
            c = self.sixes.encipher(n)
        else:
            tw1, tw2, tw3 = self.twenties
            c = NSIXES + tw3.encipher(tw2.encipher(tw1.encipher(n - NSIXES)))
        return self.pb.backward(c)

    def decipher_letter(self, letter: str) -> str:
        return self.kb.backward(self.decipher(self.kb.forward(letter)), like=letter)

    def encipher_letter(self, letter: str) -> str:
        return self.kb.backward(self.encipher(self.kb.forward(letter)), like=letter)

    # ── messages  ───────────────────────────────────────────────

    def _run(self, text: str, transform, component: str) -> str:
        out = []
        for ch in text:
            if self.kb.is_key(ch):
                res = transform(ch)
                debug.log(component, f"{ch}->{res} at {self.positions()}")
                out.append(res)
            else:
                out.append(ch)
                if ch.isspace():
                    continue
            self.step()
        return "".join(out)

    def decipher_message(self, ciphertext: str) -> str:
        """Decipher text, stepping after every non-whitespace character.

        Letters keep their case. Other characters are copied through; a
        garble marker ("-") or any other non-blank symbol still steps the
        machine, since it stands for a lost letter.
        """
        return self._run(ciphertext, self.decipher_letter, "decipher")

    def encipher_message(self, plaintext: str) -> str:
        return self._run(plaintext, self.encipher_letter, "encipher")

    def __repr__(self) -> str:
        return f"<Purple key={self.key} alphabet={self.alphabet} positions={self.positions()}>"


__all__ = [
    "Purple",
    "ConfigError",
    "AlphabetError",
    "KeyFormatError",
    "WiringError",
    "GARBLE",
]
