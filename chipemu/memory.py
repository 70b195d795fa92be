"""Main memory of the machine: 4 KiB with the built-in font and a loaded program."""

from __future__ import annotations

import os
import threading
from typing import Union

FONT_ADDRESS = 0x50

FONT = bytes(
    (
        0xF0, 0x90, 0x90, 0x90, 0xF0,  # 0
        0x20, 0x60, 0x20, 0x20, 0x70,  # 1
        0xF0, 0x10, 0xF0, 0x80, 0xF0,  # 2
        0xF0, 0x10, 0xF0, 0x10, 0xF0,  # 3
        0x90, 0x90, 0xF0, 0x10, 0x10,  # 4
        0xF0, 0x80, 0xF0, 0x10, 0xF0,  # 5
        0xF0, 0x80, 0xF0, 0x90, 0xF0,  # 6
        0xF0, 0x10, 0x20, 0x40, 0x40,  # 7
        0xF0, 0x90, 0xF0, 0x90, 0xF0,  # 8
        0xF0, 0x90, 0xF0, 0x10, 0xF0,  # 9
        0xF0, 0x90, 0xF0, 0x90, 0x90,  # A
        0xE0, 0x90, 0xE0, 0x90, 0xE0,  # B
        0xF0, 0x80, 0x80, 0x80, 0xF0,  # C
        0xE0, 0x90, 0x90, 0x90, 0xE0,  # D
        0xF0, 0x80, 0xF0, 0x80, 0xF0,  # E
        0xF0, 0x80, 0xF0, 0x80, 0x80,  # F
    )
)

TERMINATOR = b"\xff\xff"


class ProgramTooLargeError(ValueError):
    """Raised when a program does not fit between the start address and the end of memory."""


class Memory:
    """4096 bytes of memory holding the font and the running program."""

    SIZE = 4096
    PROGRAM_START = 0x200
    MAX_ADDRESS = 0xFFF

    def __init__(self) -> None:
        self._mem = bytearray(self.SIZE)
        self._lock = threading.Lock()
        self._mem[FONT_ADDRESS : FONT_ADDRESS + len(FONT)] = FONT

    def load_addr(self, addr: int) -> int:
        """Return the byte at ``addr``; addresses wrap at the 12-bit boundary."""
        with self._lock:
            return self._mem[addr & self.MAX_ADDRESS]

    def load_program(self, data: bytes) -> None:
        """Copy ``data`` to the program area and append the termination instruction."""
        program = bytes(data)
        end = self.PROGRAM_START + len(program)
        if end >= self.MAX_ADDRESS:
            raise ProgramTooLargeError("Program too large.")
        with self._lock:
            self._mem[self.PROGRAM_START : end] = program
            self._mem[end : end + len(TERMINATOR)] = TERMINATOR

    def load_program_file(self, path: Union[str, os.PathLike]) -> None:
        """Read a program image from ``path`` and load it."""
        with open(path, "rb") as handle:
            self.load_program(handle.read())