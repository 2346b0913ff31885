# main.py
from __future__ import annotations

import argparse, json
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from debug import COMPONENTS, Debug
from keyboard_and_plugboard import ALPHA26
from purple import Purple
from utilities import GARBLE, group, preprocess_message

# ────────────────────────────────────────────────────────────────────────
#  0. Configuration & logging
# ────────────────────────────────────────────────────────────────────────


debug = Debug()


@dataclass(slots=True)
class Config:
    """Runtime switches that influence the text pipeline."""

    block: int = 5                  # display group size, 0 = as typed
    strip: bool = False             # drop all but letters and garbles first


# ────────────────────────────────────────────────────────────────────────
#  1. Key file loading
# ────────────────────────────────────────────────────────────────────────


def load_config(path: str | Path) -> dict:
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a JSON object")
    required = {"key", "alphabet"}
    missing = required - data.keys()
    if missing:
        raise ValueError(f"Missing keys in config: {', '.join(sorted(missing))}")
    bad = sorted(k for k in required if not isinstance(data[k], str))
    if bad:
        raise ValueError(f"Config keys must be strings: {', '.join(bad)}")
    return data


def build_machine(args: argparse.Namespace) -> Purple:
    """Machine from --config, or from --key/--alphabet."""
    if args.config:
        cfg = load_config(args.config)
        return Purple.from_key(cfg["key"], cfg["alphabet"])
    if not args.key:
        raise ValueError("either --config FILE or --key KEY is required")
    return Purple.from_key(args.key, args.alphabet)


# ────────────────────────────────────────────────────────────────────────
#  2. CipherPipeline – the high‑level encrypt/decrypt API
# ────────────────────────────────────────────────────────────────────────


class CipherPipeline:
    """Encrypt / decrypt whole messages, each from the daily start position."""

    def __init__(self, machine: Purple, cfg: Config) -> None:
        self.machine = machine
        self.cfg = cfg

    def _prepare(self, text: str) -> str:
        return preprocess_message(text, keep=GARBLE) if self.cfg.strip else text

    def encrypt(self, msg: str) -> str:
        self.machine.reset()
        cipher = self.machine.encipher_message(self._prepare(msg))
        return group(cipher, self.cfg.block) if self.cfg.strip else cipher

    def decrypt(self, cipher: str) -> str:
        self.machine.reset()
        return self.machine.decipher_message(self._prepare(cipher))


# ────────────────────────────────────────────────────────────────────────
#  3. CLI helpers
# ────────────────────────────────────────────────────────────────────────


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Encrypt or decrypt with a PURPLE machine")
    p.add_argument("mode", choices=["encrypt", "decrypt"], help="Direction of the machine.")
    p.add_argument("-m", "--message", metavar="TEXT", help="Text to process. If omitted, an interactive REPL starts.")
    p.add_argument("-k", "--key", metavar="KEY", help="Switch settings, e.g. 9-1,24,6-23.")
    p.add_argument("-a", "--alphabet", default=ALPHA26, help="Daily 26-letter plugboard alphabet. Default: A-Z")
    p.add_argument("--config", metavar="FILE", help="Load key and alphabet from JSON instead of --key/--alphabet.")
    p.add_argument("--block", type=int, default=5, help="Group encrypted output in blocks of N (with --strip). Default: 5")
    p.add_argument("--strip", action="store_true", help="Keep only letters and '-' garbles before processing.")
    p.add_argument("--debug", action="append", default=[], choices=COMPONENTS, metavar="COMPONENT", help=f"Enable debug logging for one of: {', '.join(COMPONENTS)}")
    return p.parse_args(argv)


# ────────────────────────────────────────────────────────────────────────
#  4. Main entry point
# ────────────────────────────────────────────────────────────────────────


def main(argv: Sequence[str] | None = None) -> None:
    args = parse_args(argv)
    debug.enable(*args.debug)

    try:
        machine = build_machine(args)
    except (OSError, ValueError) as e:
        sys.exit(f"Failed to load settings: {e}")

    crypto = CipherPipeline(machine, Config(block=args.block, strip=args.strip))
    run = crypto.encrypt if args.mode == "encrypt" else crypto.decrypt

    # one‑shot mode ------------------------------------------------------
    if args.message is not None:
        print(run(args.message))
        return

    # interactive REPL ---------------------------------------------------
    print(f"Loaded key {machine.key} with alphabet {machine.alphabet}.")
    print("Type blank line to quit.\n")
    while True:
        try:
            txt = input(f"{args.mode.capitalize()} > ")
        except EOFError:
            break
        if not txt.strip():
            break
        print(run(txt))


if __name__ == "__main__":
    main()
