"""One interactive quiz round."""

from __future__ import annotations

import random
import re
import sys
from typing import Protocol, TextIO

from .questions import get_question, question_count

ROUND_SIZE = 10

_INT_PREFIX = re.compile(r"\s*([+-]?[0-9]+)")


class _Shuffler(Protocol):
    def shuffle(self, x: list[int]) -> None: ...


def _next_nonblank_line(infile: TextIO) -> str:
    """Return the next line holding non-whitespace text; raise EOFError at the end."""
    while True:
        line = infile.readline()
        if not line:
            raise EOFError
        if line.strip():
            return line


def _read_int(infile: TextIO) -> int | None:
    """Read a line and return its leading integer, or None if it has none."""
    match = _INT_PREFIX.match(_next_nonblank_line(infile))
    return int(match.group(1)) if match else None


def play_game(
    infile: TextIO | None = None,
    outfile: TextIO | None = None,
    rng: _Shuffler | None = None,
) -> int:
    """Ask up to ten shuffled questions and return the number answered right."""
    infile = sys.stdin if infile is None else infile
    outfile = sys.stdout if outfile is None else outfile
    rng = random.Random() if rng is None else rng

    total = question_count()
    if total == 0:
        print("Keine Fragen verfügbar.", file=outfile)
        return 0

    count = min(total, ROUND_SIZE)
    order = list(range(total))
    rng.shuffle(order)

    score = 0
    for number, index in enumerate(order[:count], start=1):
        question = get_question(index)
        print(f"\nFrage {number}: {question.text}", file=outfile)
        for label, option in enumerate(question.options, start=1):
            print(f"{label}) {option}", file=outfile)
        print("Antwort (1-4): ", end="", file=outfile)
        outfile.flush()
        try:
            answer = _read_int(infile)
        except EOFError:
            answer = None
        if answer is None:
            print("Ungültige Eingabe. Frage wird übersprungen.", file=outfile)
            continue
        if question.is_correct(answer - 1):
            print("Richtig!", file=outfile)
            score += 1
        else:
            print("Falsch.", file=outfile)

    print(f"\nSpiel beendet. Punkte: {score} von {count}.", file=outfile)
    return score