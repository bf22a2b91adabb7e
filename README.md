# consolegames

Three small games for the terminal, and the pieces behind them as an
importable library. Nothing outside the standard library is needed.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Commands

### `enigma`

A three-rotor Enigma-style machine with fixed rotor and reflector wirings.

```
enigma
```

Type `e` to encrypt or `d` to decrypt, then the starting position of each of
the three rotors (each taken modulo 26), then the text.

- When encrypting, the rest of the line is read; spaces are dropped.
- When decrypting, a single word is read.
- ASCII letters are upper-cased and enciphered; any other character passes
  through unchanged. The rotors step after every enciphered letter, like an
  odometer.
- The result is printed in red.

Decrypting with the same rotor positions gives back the encrypted letters.
Any answer other than `e` or `d` prints a hint and exits. The command exits
with status 1 if input runs out or a rotor position is not a number.

### `checkers`

Two-player checkers on an 8×8 board, shown with row and column numbers.
White (`w`) starts on the top three rows, Blue (`b`) on the bottom three;
White moves first.

```
checkers
```

Each turn, type four numbers: the row and column to move from and the row and
column to move to, for example `2 1 3 2`.

- Plain pieces move one square diagonally forward, or jump an enemy piece two
  squares.
- A piece reaching the far row becomes a queen (`W` or `B`). Queens move any
  distance along a diagonal and take the enemy pieces they pass over.
- If you make a move that is not a capture while one of your pieces could have
  captured, that piece is taken off the board (unless it is the piece that
  just arrived at the destination square).
- After a capture, the same player moves again while that side still has a
  capture available.
- After each move the number of pieces left on each side is printed. The first
  side to lose all twelve pieces loses.

Invalid moves are reported and the same player tries again. The command exits
with status 1 when input runs out or something other than a number is typed.

### `tictactoe`

Tic-tac-toe played with the arrow keys and Enter.

```
tictactoe
```

Type `m` for two players (you are asked for both names) or `s` to play X
against the computer, which plays O. In single-player mode you choose a
difficulty:

- `easy`: the computer picks a random free cell;
- `medium`: it blocks a line of two X, otherwise plays randomly;
- `hard`: it completes a line of two O if it can, otherwise blocks, otherwise
  plays randomly.

The screen is cleared between moves. When standard input is not a terminal,
keys are read from it as characters, with `ESC [ A`–`D` taken as the arrow
keys and a newline as Enter.

## Library use

```python
from consolegames.enigma import make_machine

cipher = make_machine(1, 2, 3).encrypt_text("HELLO WORLD")
plain = make_machine(1, 2, 3).decrypt_text(cipher)   # "HELLOWORLD"
```

- `consolegames.enigma`: `Rotor` (`forward`, `backward`, `rotate`),
  `Reflector` (`reflect_forward`, `reflect_backward`), `Enigma`
  (`encrypt_char`, `encrypt_text`, `decrypt_char`, `decrypt_text`), and
  `make_machine(pos1, pos2, pos3)`, which builds a machine with the default
  wirings. `Enigma` copies the rotors it is given, so they are not changed by
  use.
- `consolegames.checkers_pieces`: the `PieceType` enum, `Piece`
  (`make_queen`, `symbol`), the `Position` of a square, and `Player`, which
  tracks whose turn it is (`switch_players`).
- `consolegames.checkers_board`: `Board` with `initialize`, `piece_at`,
  `place`, `in_bounds`, `render`, `show` and `is_valid_move`. The lost-piece
  counts are `w_count` and `b_count`. Checking a queen's long move removes the
  enemy pieces it jumps over.
- `consolegames.checkers_game`: `Game`, a `Board` with the capture checks
  (`white_can_eat`, `blue_can_eat`, `white_queen_can_eat`,
  `blue_queen_can_eat`, `will_eat`, `has_eaten`), the forfeits
  (`white_forfeit`, `blue_forfeit`, `white_queen_forfeit`,
  `blue_queen_forfeit`) and `move`. `move` takes off the piece jumped in the
  move last passed to `is_valid_move`.
- `consolegames.tictactoe`: `Position`, `Board` (`init_board`, `render`,
  `show_board`) and `Game(name1, name2, rng=None)` with `move`,
  `switch_players`, `x_won`, `o_won`, `game_over`, `valid_move`,
  `update_cursor`, `block`, `win` and `comp_move`. Pass a `random.Random` as
  `rng` to make the computer's random moves repeatable.

## What it does not do

Checkers has no computer opponent. None of the games can be saved or resumed.
The Enigma machine has no plugboard, no choice of rotors or reflector, and no
turnover notches other than the full revolution of each rotor.