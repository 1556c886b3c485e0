# fillit

fillit reads a file of tetrominoes and arranges all of them in the
smallest square it finds. Each piece is labelled with a letter in input
order (`A`, `B`, `C`, …), and the finished square is printed row by row,
with `.` for empty cells.

## Installation

```
pip install .
```

## Input format

A file holds between 1 and 26 pieces. Each piece is drawn on a 4×4 grid
of `.` and `#`: four lines of four characters, each line ending in a
newline. Pieces are separated by one empty line. Each piece has exactly
four `#` cells, and they must touch each other edge to edge:

```
##..
##..
....
....
```

## Usage

```
fillit pieces.fillit
```

For the one-piece file above the output is:

```
AA
AA
```

The search starts from a 2×2 square and, while the pieces do not fit,
moves on to the next larger square (3×3, 4×4, …).

When the file cannot be read, or does not describe a valid set of pieces,
the command prints `error`. When it is given no file name, or more than
one, it prints `usage: fillit source_file.fillit`. The exit status is 0 in
every case.

The same command can be started with `python -m fillit.cli pieces.fillit`.

## Use from Python

```python
from fillit.cli import run
from fillit.validate import read_input

print(run(read_input("pieces.fillit")), end="")
```

`run` raises `fillit.validate.InvalidInputError` (a `ValueError`) for
invalid input.

The parts that do the work can also be used on their own:

- `fillit.validate.validate(text)` checks the input text, returns the
  number of pieces and raises `InvalidInputError` when it is not valid.
  `fillit.validate.read_input(path)` reads a file's text.
- `fillit.pieces.parse_pieces(text)` turns the text into normalised
  16-character shapes, each pushed to the top-left corner.
- `fillit.solver.solve(pieces)` returns the solved square as a
  `fillit.board.Board`; `fillit.solver.backtrack(board, pieces, letter)`
  tries to fill one given board.
- `Board.render()` gives the printable grid; `Board.can_place`,
  `Board.place` and `Board.remove` work with a single shape.

The modules `fillit.numutil`, `fillit.strutil` and `fillit.output` hold
small character, string and printing helpers used alongside these.

## Running the tests

```
pip install ".[test]"
pytest
```