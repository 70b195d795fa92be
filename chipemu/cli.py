"""Command line entry point: load a program and run it in a window."""

from __future__ import annotations

import argparse
import logging
import sys
import threading
from typing import Optional, Sequence

import pygame

from chipemu.cpu import CPU
from chipemu.display import Display
from chipemu.memory import Memory, ProgramTooLargeError
from chipemu.window import Window

USAGE = "No file passed into emulator. Usage: chipemu <path/to/file>"
FRAME_DELAY_MS = 16
SCALE_FACTOR = 4
MARKER_ROW = 10


def _parse(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="chipemu", description="Run a program image.")
    parser.add_argument("path", nargs="?", help="program image to load")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Load the program named on the command line and run it until the window closes."""
    args = _parse(argv)
    if args.path is None:
        print(USAGE)
        return 1

    logging.basicConfig(level=logging.INFO, format="%(message)s")

    memory = Memory()
    try:
        memory.load_program_file(args.path)
    except FileNotFoundError:
        print("File not found.", file=sys.stderr)
        return 1
    except (OSError, ProgramTooLargeError) as exc:
        print(exc, file=sys.stderr)
        return 1

    display = Display()
    for x in range(display.width):
        display.toggle_pixel(x, MARKER_ROW)

    cpu = CPU(memory, display)
    stop = threading.Event()
    threads = [
        threading.Thread(target=cpu.run_timers, args=(stop,), daemon=True),
        threading.Thread(target=cpu.run, args=(stop,), daemon=True),
    ]
    for thread in threads:
        thread.start()

    try:
        with Window(display, SCALE_FACTOR) as window:
            while not window.quit_requested():
                window.render()
                pygame.time.delay(FRAME_DELAY_MS)
    finally:
        stop.set()
        for thread in threads:
            thread.join()
    return 0


if __name__ == "__main__":
    sys.exit(main())