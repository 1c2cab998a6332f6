# settings_generator.py
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from random import Random, SystemRandom
from typing import Dict, List, Sequence

from keyboard_and_plugboard import SIZE

# ── helpers ───────────────────────────────────────────────────────


def build_rng(seed: int | None) -> Random | SystemRandom:
    """Deterministic RNG when *seed* given; CSPRNG otherwise."""
    return Random(seed) if seed is not None else SystemRandom()


def make_rotor(rng: Random | SystemRandom) -> List[int]:
    """Return a random permutation of the 26 positions."""
    wiring = list(range(SIZE))
    rng.shuffle(wiring)
    return wiring


def make_reflector(rng: Random | SystemRandom) -> List[int]:
    """Return 13 disjoint pairs as a flat list, no position left unpaired."""
    pool = list(range(SIZE))
    rng.shuffle(pool)
    return pool


def choose_pairs(k: int, rng: Random | SystemRandom) -> List[int]:
    """Return *k* disjoint plug pairs as a flat list."""
    k = min(k, SIZE // 2)
    pool = list(range(SIZE))
    rng.shuffle(pool)
    return pool[: 2 * k]


def choose_notches(count: int, max_n: int, rng) -> List[List[int]]:
    if max_n <= 0:
        return [[] for _ in range(count)]
    return [sorted(rng.sample(range(SIZE), rng.randint(0, max_n))) for _ in range(count)]


def generate(
    n_rot: int, n_pairs: int, max_notches: int, rng: Random | SystemRandom
) -> Dict[str, list]:
    notches = choose_notches(n_rot, max_notches, rng)
    return {
        "plugboard": choose_pairs(n_pairs, rng),
        "reflector": make_reflector(rng),
        "rotors": [
            {"wiring": make_rotor(rng), "notches": notch} for notch in notches
        ],
        "positions": [rng.randrange(SIZE) for _ in range(n_rot)],
    }


# ── output formatters ─────────────────────────────────────────────


def _line(values: Sequence[int]) -> str:
    return " ".join(str(v) for v in values) + "\n"


def write_files(cfg: Dict[str, list], outdir: Path) -> List[Path]:
    """Write the classic one-table-per-file layout; return the paths in CLI order."""
    outdir.mkdir(parents=True, exist_ok=True)
    written: List[Path] = []

    pb = outdir / "plugboard.pb"
    pb.write_text(_line(cfg["plugboard"]), encoding="utf-8")
    rf = outdir / "reflector.rf"
    rf.write_text(_line(cfg["reflector"]), encoding="utf-8")
    written += [pb, rf]

    for idx, rotor in enumerate(cfg["rotors"], 1):
        rot = outdir / f"rotor{idx}.rot"
        rot.write_text(_line(rotor["wiring"] + rotor["notches"]), encoding="utf-8")
        written.append(rot)

    pos = outdir / "rotor.pos"
    pos.write_text(_line(cfg["positions"]), encoding="utf-8")
    written.append(pos)
    return written


def parse_cli(argv: Sequence[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="enigma-settings", description="Generate a random machine configuration")
    p.add_argument("--seed", type=int, help="Deterministic seed (omit for random)")
    p.add_argument("--rotors", type=int, default=3, help="How many rotors (default 3)")
    p.add_argument("--pairs", type=int, default=10, help="Plugboard pairs, at most 13 (default 10)")
    p.add_argument("--notches", type=int, default=1, help="Maximum notches per rotor (default 1)")
    p.add_argument("--format", choices=["files", "json"], default="json", help="Output format (default json)")
    p.add_argument(
        "--outfile",
        type=Path,
        default=Path("enigma_config.json"),
        help="Destination JSON file (default: enigma_config.json)",
    )
    p.add_argument(
        "--outdir",
        type=Path,
        default=Path("."),
        help="Destination directory for --format files (default: .)",
    )
    args = p.parse_args(argv)
    if args.rotors < 0 or args.pairs < 0 or args.notches < 0:
        p.error("counts must not be negative")
    return args


# ── main ─────────────────────────────────────────────────────────


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_cli(argv)
    rng = build_rng(args.seed)
    cfg = generate(args.rotors, args.pairs, args.notches, rng)

    if args.format == "json":
        args.outfile.write_text(json.dumps(cfg, indent=2), encoding="utf-8")
        print(f"✅  Wrote {args.outfile}")
    else:
        paths = write_files(cfg, args.outdir)
        print("✅  Wrote " + " ".join(str(p) for p in paths))

    print(f"   rotors      : {len(cfg['rotors'])}\n"
          f"   positions   : {cfg['positions']}\n"
          f"   plug pairs  : {len(cfg['plugboard']) // 2}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
