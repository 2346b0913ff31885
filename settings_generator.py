# settings_generator.py
from __future__ import annotations

import argparse
import json
from pathlib import Path
from random import Random, SystemRandom
from typing import Sequence

from keyboard_and_plugboard import ALPHA26
from purple import NPOSITIONS, Purple
from utilities import format_key

# ── helpers ───────────────────────────────────────────────────────


def build_rng(seed: int | None) -> Random | SystemRandom:
    """Deterministic RNG when *seed* given; CSPRNG otherwise."""
    return Random(seed) if seed is not None else SystemRandom()


def choose_key(rng: Random | SystemRandom) -> str:
    """Random switch settings: four start positions and a fast/middle pair."""
    sixes = rng.randint(1, NPOSITIONS)
    twenties = tuple(rng.randint(1, NPOSITIONS) for _ in range(3))
    fast, middle = rng.sample([1, 2, 3], 2)
    return format_key(sixes, twenties, fast, middle)


def choose_alphabet(rng: Random | SystemRandom) -> str:
    pool = list(ALPHA26)
    rng.shuffle(pool)
    return "".join(pool)


def make_settings(seed: int | None = None, name: str = "") -> dict[str, str]:
    rng = build_rng(seed)
    cfg = {"key": choose_key(rng), "alphabet": choose_alphabet(rng)}
    if name:
        cfg["name"] = name
    # refuse to write anything the machine would reject
    Purple.from_key(cfg["key"], cfg["alphabet"])
    return cfg


def parse_cli(argv: Sequence[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Generate a PURPLE daily key")
    p.add_argument("--seed", type=int, help="Deterministic seed (omit for random)")
    p.add_argument("--name", default="", help="Optional label stored with the key")
    p.add_argument(
        "--outfile",
        type=Path,
        default=Path("purple_key.json"),
        help="Destination JSON file (default: purple_key.json)",
    )
    return p.parse_args(argv)


# ── main ─────────────────────────────────────────────────────────


def main(argv: Sequence[str] | None = None) -> None:
    args = parse_cli(argv)
    cfg = make_settings(args.seed, args.name)

    args.outfile.write_text(json.dumps(cfg, indent=2), encoding="utf-8")
    print(f"Wrote {args.outfile}\n"
        f"   key       : {cfg['key']}\n"
        f"   alphabet  : {cfg['alphabet']}")


if __name__ == "__main__":
    main()
