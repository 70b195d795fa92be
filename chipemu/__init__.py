"""A small CHIP-8 emulator: memory, display, CPU, a pygame window and a command."""

__version__ = "0.1.0"

__all__ = ["cli", "cpu", "display", "memory", "window"]