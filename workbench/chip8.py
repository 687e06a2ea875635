"""A tiny CHIP-8 style CPU supporting a handful of instructions."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field

MEMORY_SIZE = 4096
REGISTER_COUNT = 16
STACK_SIZE = 16


class CpuError(Exception):
    """Base error for the CPU."""


class StackUnderflowError(CpuError):
    """Raised when returning with an empty call stack."""


class StackOverflowError(CpuError):
    """Raised when calling with a full call stack."""


class UnknownOpcodeError(CpuError):
    """Raised when an instruction is not supported."""


@dataclass
class Cpu:
    """CPU state: registers, memory and a call stack."""

    registers: bytearray = field(default_factory=lambda: bytearray(REGISTER_COUNT))
    memory: bytearray = field(default_factory=lambda: bytearray(MEMORY_SIZE))
    position_in_memory: int = 0
    stack: list[int] = field(default_factory=lambda: [0] * STACK_SIZE)
    stack_pointer: int = 0

    def load(self, address: int, data: bytes) -> None:
        """Copy ``data`` into memory starting at ``address``."""
        end = address + len(data)
        if address < 0 or end > len(self.memory):
            raise ValueError(f"data does not fit in memory at {address:#05x}")
        self.memory[address:end] = data

    def run(self) -> None:
        """Execute instructions until the 0x0000 halt opcode."""
        while True:
            pos = self.position_in_memory
            op_code = (self.memory[pos] << 8) | self.memory[pos + 1]

            x = (op_code & 0x0F00) >> 8
            y = (op_code & 0x00F0) >> 4
            kk = op_code & 0x00FF
            op_minor = op_code & 0x000F
            addr = op_code & 0x0FFF
            family = op_code >> 12

            self.position_in_memory += 2

            if op_code == 0x0000:
                return
            if op_code == 0x00E0:
                continue
            if op_code == 0x00EE:
                self.ret()
            elif family == 0x1:
                self.jump(addr)
            elif family == 0x2:
                self.call(addr)
            elif family == 0x3:
                self.se(x, kk)
            elif family == 0x4:
                self.sne(x, kk)
            elif family == 0x5:
                self.se(x, y)
            elif family == 0x6:
                self.ld(x, kk)
            elif family == 0x7:
                self.add(x, kk)
            elif family == 0x8 and op_minor == 0:
                self.ld(x, self.registers[y])
            elif family == 0x8 and op_minor == 1:
                self.or_xy(x, y)
            elif family == 0x8 and op_minor == 2:
                self.and_xy(x, y)
            elif family == 0x8 and op_minor == 3:
                self.xor_xy(x, y)
            elif family == 0x8 and op_minor == 4:
                self.add(x, y)
            else:
                raise UnknownOpcodeError(f"op_code: {op_code:04x}")

    def ret(self) -> None:
        """(00EE) Return from the current subroutine."""
        if self.stack_pointer == 0:
            raise StackUnderflowError("Stack Underflow")
        self.stack_pointer -= 1
        self.position_in_memory = self.stack[self.stack_pointer]

    def jump(self, addr: int) -> None:
        """(1nnn) Jump to ``addr``."""
        self.position_in_memory = addr

    def call(self, addr: int) -> None:
        """(2nnn) Call the subroutine at ``addr``."""
        if self.stack_pointer >= len(self.stack):
            raise StackOverflowError("Stack overflow!")
        self.stack[self.stack_pointer] = self.position_in_memory & 0xFFFF
        self.stack_pointer += 1
        self.position_in_memory = addr

    def se(self, x: int, y: int) -> None:
        """(3xkk, 5xy0) Skip the next instruction if ``x`` equals ``y``."""
        if x == y:
            self.position_in_memory += 2

    def sne(self, x: int, y: int) -> None:
        """(4xkk) Skip the next instruction if ``x`` differs from ``y``."""
        if x != y:
            self.position_in_memory += 2

    def ld(self, x: int, y: int) -> None:
        """(6xkk) Set register ``x`` to the value ``y``."""
        self.registers[x] = y

    def add(self, x: int, y: int) -> None:
        """(7xkk, 8xy4) Add register ``y`` to register ``x``."""
        total = self.registers[x] + self.registers[y]
        if total > 0xFF:
            raise OverflowError("attempt to add with overflow")
        self.registers[x] = total

    def or_xy(self, x: int, y: int) -> None:
        """(8xy1) Set register ``x`` to ``x | y``."""
        self.registers[x] |= self.registers[y]

    def and_xy(self, x: int, y: int) -> None:
        """(8xy2) Set register ``x`` to ``x & y``."""
        self.registers[x] &= self.registers[y]

    def xor_xy(self, x: int, y: int) -> None:
        """(8xy3) Set register ``x`` to ``x ^ y``."""
        self.registers[x] ^= self.registers[y]


def main(argv: list[str] | None = None) -> int:
    """Run a small program that calls a doubling subroutine twice."""
    cpu = Cpu()
    cpu.registers[0] = 5
    cpu.registers[1] = 10

    cpu.load(0x000, bytes([0x21, 0x00, 0x21, 0x00]))
    cpu.load(0x100, bytes([0x80, 0x14, 0x80, 0x14, 0x00, 0xEE]))

    cpu.run()

    print(f"5 + (10 * 2) + (10 * 2) = {cpu.registers[0]}")
    return 0


if __name__ == "__main__":
    sys.exit(main())