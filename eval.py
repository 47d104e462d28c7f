#!/usr/bin/env python3
"""
Evaluate the heuristic TicTacToe opponent.

Usage:
    python eval.py
    python eval.py --games 2000 --seed 0
"""

import sys
import argparse
from pathlib import Path

import numpy as np
from tqdm.auto import tqdm

# Add src to path
sys.path = [str(Path(__file__).parent / "src")] + sys.path

from tictactoe import eval_heuristic_vs_random


def main():
    parser = argparse.ArgumentParser(description="Evaluate TicTacToe heuristic")
    parser.add_argument("--games", type=int, default=500, help="Number of eval games")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")

    args = parser.parse_args()

    rng = np.random.default_rng(args.seed)

    tqdm.write("=== Evaluation ===")
    tqdm.write(f"\nvs Random ({args.games} games)...")
    results = eval_heuristic_vs_random(games=args.games, rng=rng, progress=True)
    tqdm.write(f"  Wins:   {results['heuristic_w']:.2%}")
    tqdm.write(f"  Draws:  {results['heuristic_d']:.2%}")
    tqdm.write(f"  Losses: {results['heuristic_l']:.2%}")


if __name__ == "__main__":
    main()
