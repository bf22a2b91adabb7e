"""A three-rotor Enigma-style cipher machine with a small console front end."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass, replace
from string import ascii_letters
from typing import Callable, TextIO

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
DEFAULT_REFLECTOR = "WJDZUIKHYRMQPSALOXFCNTBVEG"
DEFAULT_ROTORS = (
    "MVCBXLPQAFUKJZDHRTEYINGSWO",
    "TNLOCKMZEPGWBIVXSDJQFRAUHY",
    "BDFHJLCPRTXVNZYEIWGAKMUSQO",
)

_RED = "\033[31m"
_RESET = "\033[0m"


@dataclass
class Rotor:
    """A rotor with a wiring permutation and a current offset."""

    position: int
    wiring: str

    def forward(self, letter: str) -> str:
        return self.wiring[(ALPHABET.index(letter) + self.position) % 26]

    def backward(self, letter: str) -> str:
        return ALPHABET[(self.wiring.index(letter) - self.position) % 26]

    def rotate(self) -> None:
        self.position = (self.position + 1) % 26


@dataclass(frozen=True)
class Reflector:
    """A fixed permutation applied between the forward and backward passes."""

    wiring: str

    def reflect_forward(self, letter: str) -> str:
        return self.wiring[ALPHABET.index(letter)]

    def reflect_backward(self, letter: str) -> str:
        return ALPHABET[self.wiring.index(letter)]


class Enigma:
    """Three rotors and a reflector; the rotors step after every letter."""

    def __init__(self, rotor1: Rotor, rotor2: Rotor, rotor3: Rotor, reflector: Reflector) -> None:
        self.rotors = (replace(rotor1), replace(rotor2), replace(rotor3))
        self.reflector = reflector

    def _step(self) -> None:
        first, second, third = self.rotors
        first.rotate()
        if first.position == 0:
            second.rotate()
        if second.position == 0:
            third.rotate()

    def _pass(self, char: str, reflect: Callable[[str], str]) -> str:
        if char not in ascii_letters:
            return char
        letter = char.upper()
        for rotor in self.rotors:
            letter = rotor.forward(letter)
        letter = reflect(letter)
        for rotor in reversed(self.rotors):
            letter = rotor.backward(letter)
        self._step()
        return letter

    def encrypt_char(self, char: str) -> str:
        return self._pass(char, self.reflector.reflect_forward)

    def encrypt_text(self, text: str) -> str:
        """Encrypt text, dropping spaces."""
        return "".join(self.encrypt_char(char) for char in text if char != " ")

    def decrypt_char(self, char: str) -> str:
        return self._pass(char, self.reflector.reflect_backward)

    def decrypt_text(self, text: str) -> str:
        return "".join(self.decrypt_char(char) for char in text)


def make_machine(pos1: int, pos2: int, pos3: int) -> Enigma:
    """Build a machine with the default wirings and the given rotor positions."""
    rotors = [
        Rotor(pos % 26, wiring)
        for pos, wiring in zip((pos1, pos2, pos3), DEFAULT_ROTORS)
    ]
    return Enigma(*rotors, Reflector(DEFAULT_REFLECTOR))


class _Tokens:
    """Whitespace-separated reading from a text stream, line by line."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._pending = ""

    def _fill(self) -> None:
        while not self._pending.strip():
            line = self._stream.readline()
            if not line:
                raise EOFError
            self._pending = line

    def char(self) -> str:
        self._fill()
        stripped = self._pending.lstrip()
        self._pending = stripped[1:]
        return stripped[0]

    def word(self) -> str:
        self._fill()
        match = re.match(r"\s*(\S+)", self._pending)
        assert match is not None
        self._pending = self._pending[match.end():]
        return match.group(1)

    def integer(self) -> int:
        self._fill()
        match = re.match(r"\s*([+-]?\d+)", self._pending)
        if match is None:
            raise ValueError("expected an integer")
        self._pending = self._pending[match.end():]
        return int(match.group(1))

    def rest_of_line(self) -> str:
        if not self._pending:
            self._pending = self._stream.readline()
        self._pending = self._pending[1:]
        if not self._pending:
            self._pending = self._stream.readline()
            if not self._pending:
                raise EOFError
        line, self._pending = self._pending, ""
        return line.rstrip("\r\n")


def main(argv: list[str] | None = None) -> int:
    """Ask for a mode, rotor positions and text, then print the result."""
    tokens = _Tokens(sys.stdin)
    print("Encrypt or Decrypt (type e or d).")
    try:
        mode = tokens.char()
        if mode not in ("e", "d"):
            print("Type 'e' or 'd'. ")
            return 0
        positions = []
        for label in ("first", "second", "third"):
            print(f"Position of {label} Rotor: ", end="", flush=True)
            positions.append(tokens.integer())
        machine = make_machine(*positions)
        print()
        print("Enter text: ")
        if mode == "e":
            result = machine.encrypt_text(tokens.rest_of_line())
            print("Here is the encrypted text.")
        else:
            result = machine.decrypt_text(tokens.word())
            print("Here is the decrypted text.")
    except EOFError:
        print()
        return 1
    except ValueError as exc:
        print(f"\n{exc}")
        return 1
    print("".join(f"{_RED}{char}{_RESET}" for char in result))
    return 0