#!/usr/bin/env python3
"""
Play TicTacToe in the terminal.

Usage:
    python play.py                       # Menu, auto-restart on
    python play.py --no-auto-restart
    python play.py --seed 7 --delay 0.5
"""

import sys
import time
import argparse
from pathlib import Path

# Add src to path
sys.path = [str(Path(__file__).parent / "src")] + sys.path

from tictactoe import GameSession, Mode, SessionConfig
from tictactoe.game import SYMBOLS
from tictactoe.session import COMPUTER_MARK


HELP = "Moves 0-8 | r: reset | a: toggle auto-restart | m: menu | q: quit"


def print_board(board):
    """Pretty print board."""
    for i in range(3):
        row = "|".join(SYMBOLS[board[i*3 + j]] for j in range(3))
        print(row)
        if i < 2:
            print("-+-+-")


def wait(session: GameSession, seconds: float):
    """Sleep for real, then let the session's timers catch up."""
    time.sleep(seconds)
    session.scheduler.advance(seconds)


def choose_mode(session: GameSession) -> bool:
    print("\n=== Tic Tac Toe ===")
    print(session.status())
    print(" 1) Player vs Player")
    print(" 2) Player vs Computer")
    print(" q) Quit")
    try:
        choice = input("> ").strip().lower()
    except (EOFError, KeyboardInterrupt):
        return False
    if choice == "1":
        session.start_new_game(Mode.PLAYER)
    elif choice == "2":
        session.start_new_game(Mode.COMPUTER)
    elif choice == "q":
        return False
    else:
        print("Invalid choice, try again")
    return True


def play_turn(session: GameSession) -> bool:
    title = "Player vs Computer" if session.mode is Mode.COMPUTER else "Player vs Player"
    print(f"\n{title}  [auto-restart: {'ON' if session.auto_restart else 'OFF'}]")
    print_board(session.board)
    print(session.status())

    # Computer to move or countdown running: just let time pass
    if not session.outcome.is_over and session.mode is Mode.COMPUTER and session.player == COMPUTER_MARK:
        deadline = session.scheduler.next_deadline()
        if deadline is not None:
            wait(session, max(0.0, deadline - session.scheduler.now))
            return True
    if session.countdown is not None:
        wait(session, session.config.countdown_interval)
        return True

    try:
        cmd = input(f"({HELP}) > ").strip().lower()
    except (EOFError, KeyboardInterrupt):
        print("\nGame aborted")
        return False

    if cmd == "q":
        return False
    if cmd == "r":
        session.reset_game()
    elif cmd == "a":
        session.toggle_auto_restart()
    elif cmd == "m":
        session.back_to_menu()
    else:
        try:
            index = int(cmd)
        except ValueError:
            print("Unknown command")
            return True
        if not session.press(index):
            print("Invalid move, try again")
    return True


def main():
    parser = argparse.ArgumentParser(description="Play TicTacToe")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the computer's tie-breaks")
    parser.add_argument("--delay", type=float, default=0.3, help="Seconds before the computer replies")
    parser.add_argument("--countdown", type=int, default=3, help="Auto-restart countdown (seconds)")
    parser.add_argument("--no-auto-restart", action="store_true", help="Start with auto-restart off")

    args = parser.parse_args()

    config = SessionConfig(
        computer_delay=args.delay,
        countdown_seconds=args.countdown,
        auto_restart=not args.no_auto_restart,
        seed=args.seed,
    )
    session = GameSession(config)

    try:
        running = True
        while running:
            if session.mode is None:
                running = choose_mode(session)
            else:
                running = play_turn(session)
    finally:
        session.close()
    print("Bye!")


if __name__ == "__main__":
    main()
