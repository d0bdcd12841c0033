# ruff: noqa: E402
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

import numpy as np

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from gorillas import Match, MatchConfig, PhysicsConfig
from gorillas.arena.duel import resolve_throw


def run_round(match: Match, shot_rng: np.random.Generator, max_throws: int) -> dict:
    throws = 0
    while not match.state.game_over and throws < max_throws:
        angle = float(shot_rng.integers(20, 80))
        velocity = float(shot_rng.integers(30, 90))
        resolve_throw(match, angle, velocity)
        throws += 1

    state = match.state
    return {
        "round": state.round,
        "throws": throws,
        "winner": state.winner,
        "scores": list(state.scores),
        "wind": state.wind,
        "buildings": len(state.city),
    }


def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("--rounds", type=int, default=3)
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument("--max-throws", type=int, default=200, help="Give up on a round after this many throws")
    parser.add_argument("--time-scale", type=float, default=1.0)
    parser.add_argument("--record", action="store_true", help="Write round recipes to JSON")
    parser.add_argument("--out", type=str, default="runs/smoke", help="Output directory for recipes")
    args = parser.parse_args()

    match = Match(MatchConfig(physics=PhysicsConfig(time_scale=args.time_scale)), seed=args.seed)
    shot_rng = np.random.default_rng(args.seed + 1)

    out_dir = Path(args.out)
    if args.record:
        out_dir.mkdir(parents=True, exist_ok=True)

    results = []
    for rnd in range(args.rounds):
        if rnd > 0:
            match.new_round()
        recipe = match.recipe()
        result = run_round(match, shot_rng, args.max_throws)
        results.append(result)
        print(f"round {rnd + 1}: {result}")

        if args.record:
            p = out_dir / f"recipe_seed_{args.seed}_round_{rnd + 1}.json"
            p.write_text(json.dumps(recipe), encoding="utf-8")

    # Tiny summary
    wins = {1: 0, 2: 0, None: 0}
    for r in results:
        wins[r["winner"]] += 1
    print("summary:", {"player1": wins[1], "player2": wins[2], "unfinished": wins[None]})


if __name__ == "__main__":
    main()
