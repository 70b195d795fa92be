# chipemu

A small CHIP-8 emulator. It loads a program image into 4 KiB of memory at
address `0x200`. It runs the interpreter at 10 instructions per second and shows
the frame buffer in a pygame window.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running a program

```
chipemu path/to/program.ch8
```

- If no file is given, the command prints a usage message and exits with status 1.
- If the file does not exist, it prints `File not found.` and exits with status 1.
- If the image is too large for memory, it prints the error and exits with status 1.

Once the program is loaded, the command lights a horizontal line across row 10
of the display. It then starts the interpreter and the timers in background
threads and opens a 512×256 window: the 128×64 display scaled by 4. Close the
window to stop the emulator; the threads are stopped and the command exits with
status 0.

Log messages such as `Program terminated.` and `beep` are written through the
`logging` module at INFO level.

After the program image, two `0xFF` bytes are written to memory. The emulator
reads them as an "end of program" instruction. When the CPU reaches it, it
reports `Program terminated.` once and stays on that instruction.

## Supported instructions

| Opcode | Meaning                                                       |
|--------|---------------------------------------------------------------|
| `00E0` | clear the screen                                              |
| `1NNN` | jump to `NNN`                                                 |
| `6XNN` | set `VX` to `NN`                                              |
| `7XNN` | add `NN` to `VX` (wraps at 8 bits, `VF` untouched)            |
| `ANNN` | set the index register to `NNN`                               |
| `DXYN` | draw an `N`-row sprite from memory at the index register at (`VX` mod 64, `VY` mod 32); `VF` is set to 1 on collision, else 0 |
| `CXNN` | handled the same way as `DXYN`                                |
| `FXFF` | end of program                                                |

All other opcodes are fetched and then ignored.

## What it does not do

- No keyboard input: the `EX9E`, `EXA1` and `FX0A` instructions do nothing.
- No subroutines: `2NNN` and `00EE` do nothing.
- No arithmetic, logic, conditional skips, random numbers, BCD, font lookup or
  register load/store instructions (`3XNN`–`5XY0`, `8XYN`, `9XY0`, `BNNN`,
  `FX07`–`FX65`).
- No sound: a running sound timer only logs `beep`.
- Programs cannot set the timers; only `CPU.set_delay_timer` and
  `CPU.set_sound_timer` can.

## Using the library

```python
from chipemu.memory import Memory
from chipemu.display import Display
from chipemu.cpu import CPU

memory = Memory()
memory.load_program(bytes([0x60, 0x05, 0xA0, 0x50, 0xD0, 0x05]))
display = Display(128, 64)
cpu = CPU(memory, display)

for _ in range(3):
    cpu.step()

print(sorted(display.lit_pixels()))
```

- `chipemu.memory.Memory` holds 4096 bytes, with the built-in hex font at `0x50`.
  `load_addr` reads one byte; addresses wrap at 12 bits. `load_program` copies an
  image to `0x200` and raises `ProgramTooLargeError` when it does not fit.
  `load_program_file` reads the image from a path.
- `chipemu.display.Display` is a grid of on/off pixels, 128×64 by default.
  `toggle_pixel` and `get_pixel` ignore coordinates outside the grid. `clear`
  turns every pixel off. `lit_pixels` lists the lit `(x, y)` pairs.
- `chipemu.cpu.CPU` exposes `pc`, `index`, `registers`, `state` (a `CPUState`),
  `delay_timer` and `sound_timer`. `step` runs one instruction and returns its
  opcode. `tick_timers` counts both timers down by one. `run` and `run_timers`
  loop until the `threading.Event` you pass them is set.
- `chipemu.window.Window(display, scale_factor)` shows a `Display` in a pygame
  window. It has `render`, `quit_requested` and `close`, and it works as a
  context manager.