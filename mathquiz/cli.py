"""Interactive main menu of the quiz."""

from __future__ import annotations

import argparse
import contextlib
import sys
from typing import TextIO

from .game import _next_nonblank_line, _read_int, play_game
from .leaderboard import NAME_LEN, Leaderboard, LeaderboardFullError

LB_FILE = "leaderboard.txt"

_MENU = (
    "\nHauptmenü\n"
    "1. Spielen\n"
    "2. Bestenliste anzeigen\n"
    "3. Bestenliste zurücksetzen\n"
    "4. Beenden\n"
    "Auswahl: "
)


def _read_name(infile: TextIO) -> str | None:
    try:
        line = _next_nonblank_line(infile)
    except EOFError:
        return None
    return line.split()[0][: NAME_LEN - 1]


def show_leaderboard(board: Leaderboard, path=LB_FILE, outfile: TextIO | None = None) -> None:
    """Reload the leaderboard from ``path`` and print it."""
    outfile = sys.stdout if outfile is None else outfile
    try:
        board.load(path)
    except OSError:
        print("Noch keine Bestenliste vorhanden.", file=outfile)
        return
    print("\nBestenliste:", file=outfile)
    for rank, entry in enumerate(board, start=1):
        print(f"{rank}. {entry.name} - {entry.score}", file=outfile)


def _save_quietly(board: Leaderboard, path) -> None:
    with contextlib.suppress(OSError):
        board.save(path)


def run_menu(
    board: Leaderboard,
    path=LB_FILE,
    infile: TextIO | None = None,
    outfile: TextIO | None = None,
    rng=None,
) -> None:
    """Run the menu until the user quits or input ends."""
    infile = sys.stdin if infile is None else infile
    outfile = sys.stdout if outfile is None else outfile

    while True:
        print(_MENU, end="", file=outfile)
        outfile.flush()
        try:
            choice = _read_int(infile)
        except EOFError:
            _save_quietly(board, path)
            return
        if choice is None:
            print("Ungültige Eingabe. Bitte Zahl zwischen 1 und 4 eingeben.", file=outfile)
            continue

        if choice == 1:
            score = play_game(infile, outfile, rng)
            print("Bitte Namen eingeben: ", end="", file=outfile)
            outfile.flush()
            name = _read_name(infile)
            if name is None:
                print("Ungültige Eingabe. Ergebnis wird nicht gespeichert.", file=outfile)
            else:
                with contextlib.suppress(LeaderboardFullError):
                    board.add(name, score)
                _save_quietly(board, path)
        elif choice == 2:
            show_leaderboard(board, path, outfile)
        elif choice == 3:
            try:
                board.reset(path)
            except OSError:
                print("Fehler beim Zurücksetzen der Bestenliste.", file=outfile)
            else:
                print("Bestenliste zurückgesetzt.", file=outfile)
        elif choice == 4:
            _save_quietly(board, path)
            print("Programm wird beendet.", file=outfile)
            return
        else:
            print("Bitte Zahl zwischen 1 und 4 eingeben.", file=outfile)


def main(argv=None) -> int:
    """Start the quiz menu with the leaderboard in the working directory."""
    parser = argparse.ArgumentParser(prog="mathquiz", description="Interactive maths quiz.")
    parser.parse_args(argv)
    board = Leaderboard()
    with contextlib.suppress(OSError):
        board.load(LB_FILE)
    run_menu(board, LB_FILE)
    return 0