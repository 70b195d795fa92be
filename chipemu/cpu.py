"""Instruction interpreter and timers."""

from __future__ import annotations

import enum
import logging
import threading

from chipemu.display import Display
from chipemu.memory import Memory

logger = logging.getLogger(__name__)


class CPUState(enum.IntEnum):
    """Processor state."""

    RUNNING = 0
    HALTED = 0x01
    INVALID_REGISTER = 3


class InvalidRegisterError(RuntimeError):
    """Raised when an instruction refers to a register that does not exist."""


class CPU:
    """Fetches, decodes and executes instructions from memory."""

    CPU_SPEED = 10  # cycles per second
    TIMER_INTERVAL = 16 / 1000  # roughly 60 Hz
    REGISTER_COUNT = 16

    def __init__(self, memory: Memory, display: Display) -> None:
        self.memory = memory
        self.display = display
        self.pc = Memory.PROGRAM_START
        self.index = 0
        self.registers = bytearray(self.REGISTER_COUNT)
        self.stack: list[int] = []
        self.state = CPUState.RUNNING
        self._delay_timer = 0
        self._sound_timer = 0
        self._delay_lock = threading.Lock()
        self._sound_lock = threading.Lock()

    @property
    def delay_timer(self) -> int:
        with self._delay_lock:
            return self._delay_timer

    @property
    def sound_timer(self) -> int:
        with self._sound_lock:
            return self._sound_timer

    def set_delay_timer(self, value: int) -> None:
        with self._delay_lock:
            self._delay_timer = value & 0xFF

    def set_sound_timer(self, value: int) -> None:
        with self._sound_lock:
            self._sound_timer = value & 0xFF

    def tick_timers(self) -> None:
        """Count both timers down by one, stopping at zero."""
        with self._delay_lock:
            if self._delay_timer > 0:
                self._delay_timer -= 1
                logger.debug("delay")
        with self._sound_lock:
            if self._sound_timer > 0:
                self._sound_timer -= 1
                logger.info("beep")

    def step(self) -> int:
        """Execute one instruction and return its opcode."""
        opcode = (self.memory.load_addr(self.pc) << 8) | self.memory.load_addr(self.pc + 1)
        logger.debug("%x : %x", opcode, self.pc)
        self.pc = (self.pc + 2) & Memory.MAX_ADDRESS

        match opcode >> 12:
            case 0x0:
                if opcode & 0xFFF == 0x0E0:
                    logger.debug("clear screen")
                    self.display.clear()
            case 0x1:
                dest = opcode & 0xFFF
                logger.debug("jump to %x", dest)
                self.pc = dest
            case 0x6:
                vx, imm = (opcode >> 8) & 0xF, opcode & 0xFF
                logger.debug("set register %x to %x", vx, imm)
                self.registers[vx] = imm
            case 0x7:
                vx, imm = (opcode >> 8) & 0xF, opcode & 0xFF
                logger.debug("add %x to register %x", imm, vx)
                self.registers[vx] = (self.registers[vx] + imm) & 0xFF
            case 0xA:
                self.index = opcode & 0xFFF
                logger.debug("set index register to %x", self.index)
            case 0xC | 0xD:
                # The random-number instruction has no handler of its own and
                # is decoded as a draw.
                self._draw(opcode)
            case 0xF:
                if opcode & 0xFF == 0xFF:
                    self.pc = (self.pc - 2) & Memory.MAX_ADDRESS
                    if self.state != CPUState.HALTED:
                        self.state = CPUState.HALTED
                        logger.info("Program terminated.")
            case _:
                pass
        return opcode

    def _draw(self, opcode: int) -> None:
        vx = (opcode >> 8) & 0xF
        vy = (opcode >> 4) & 0xF
        if vx >= self.REGISTER_COUNT or vy >= self.REGISTER_COUNT:
            self.state = CPUState.INVALID_REGISTER
            raise InvalidRegisterError("Invalid register access")
        x = self.registers[vx] & 0x3F
        y = self.registers[vy] & 0x1F
        height = opcode & 0xF
        logger.debug("draw sprite at (%x, %x) of height %x", x, y, height)
        self.registers[0xF] = 0

        for offset in range(height):
            row = self.memory.load_addr(self.index + offset)
            tx = x
            for bit in range(7, -1, -1):
                if (row >> bit) & 1:
                    if self.display.get_pixel(tx, y):
                        self.registers[0xF] = 1
                    self.display.toggle_pixel(tx, y)
                tx += 1
                if x >= 0x3F:
                    break
            y += 1
            if y >= 0x1F:
                break

    def run(self, stop_event: threading.Event) -> None:
        """Execute instructions at CPU_SPEED until ``stop_event`` is set."""
        while not stop_event.is_set():
            self.step()
            stop_event.wait(1 / self.CPU_SPEED)

    def run_timers(self, stop_event: threading.Event) -> None:
        """Count the timers down at about 60 Hz until ``stop_event`` is set."""
        while not stop_event.is_set():
            self.tick_timers()
            stop_event.wait(self.TIMER_INTERVAL)