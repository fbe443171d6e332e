# mathquiz

A small multiple-choice math quiz that runs in the terminal. Each round asks ten
questions, drawn in random order from a built-in bank of thirty. After a round
you enter your name, and your score goes on a leaderboard that is saved to a
text file and kept between sessions.

The menu and messages are in German.

## Installation

```
pip install .
```

## Playing

```
mathquiz
```

The command takes no options besides `--help`. The main menu offers four
choices:

1. **Spielen**: play a round. Answer each question with a number from 1 to 4.
   If a line holds no number, that question is skipped. After the round you
   are asked for a name; its first word (at most 63 characters) is stored
   with the score.
2. **Bestenliste anzeigen**: reload the leaderboard from its file and show it,
   highest score first.
3. **Bestenliste zurücksetzen**: clear the leaderboard and empty its file.
4. **Beenden**: save the leaderboard and quit.

Any other number, or input that is not a number, shows the menu again. When
input ends, the leaderboard is saved and the program stops.

The leaderboard is kept in `leaderboard.txt` in the current directory. Each line
holds one entry in the form `name,score`. It holds at most 100 entries; once it
is full, further scores are not recorded.

## Using it as a library

```python
from mathquiz.questions import question_count, get_question
from mathquiz.leaderboard import Leaderboard

print(question_count())        # 30
q = get_question(0)
print(q.text, q.options)
print(q.is_correct(0))         # True

board = Leaderboard()
board.add("alice", 7)
board.add("bob", 9)
for entry in board:
    print(entry.name, entry.score)   # bob 9, then alice 7
board.save("scores.txt")
```

- `mathquiz.questions`: `Question` (`text`, `options`, `correct`,
  `is_correct(choice)` with a zero-based choice), `question_count()`, and
  `get_question(index)`, which raises `IndexError` for an index out of range.
- `mathquiz.leaderboard`: `Leaderboard` with `load(path)`, `save(path)`,
  `add(name, score)`, `reset(path)`, `entries()`, `len()` and iteration, and
  the `Entry` dataclass. When no path is given, `data/leaderboard.csv` is used.
  File errors are raised as `OSError`; `add` raises `LeaderboardFullError` when
  the board already holds 100 entries. On loading, lines without a comma are
  skipped and a score without a leading number counts as 0.
- `mathquiz.game.play_game(infile, outfile, rng)` runs one round on any text
  streams, with any object that has a `shuffle` method (such as
  `random.Random`), and returns the score. Without arguments it uses standard
  input and output.
- `mathquiz.cli.run_menu(board, path, infile, outfile, rng)` runs the whole
  menu loop in the same way, and `mathquiz.cli.show_leaderboard(board, path,
  outfile)` prints the leaderboard after reloading it from `path`.

## Running the tests

```
pip install .[test]
pytest
```