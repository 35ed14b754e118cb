"""Run a tiny three-bit computer and find the register value that makes it quine."""

from collections import deque
from dataclasses import dataclass, field, replace


@dataclass
class Computer:
    """Registers A, B and C, a program of three-bit numbers, and its output."""

    a: int = 0
    b: int = 0
    c: int = 0
    program: list = field(default_factory=list)
    pointer: int = 0
    outputs: list = field(default_factory=list)

    def run(self):
        """Execute until the pointer leaves the program; return the outputs."""
        while self.pointer < len(self.program):
            self.step()
        return list(self.outputs)

    def step(self):
        """Execute the instruction at the pointer."""
        opcode = self.program[self.pointer]
        operand = self.program[self.pointer + 1]

        if opcode == 3 and self.a != 0:
            self.pointer = operand
            return

        if opcode == 0:
            self.a = self.a // 2 ** self.combo(operand)
        elif opcode == 1:
            self.b ^= operand
        elif opcode == 2:
            self.b = self.combo(operand) % 8
        elif opcode == 3:
            pass
        elif opcode == 4:
            self.b ^= self.c
        elif opcode == 5:
            self.outputs.append(self.combo(operand) % 8)
        elif opcode == 6:
            self.b = self.a // 2 ** self.combo(operand)
        elif opcode == 7:
            self.c = self.a // 2 ** self.combo(operand)
        else:
            raise ValueError(f"unknown opcode {opcode}")

        self.pointer += 2

    def combo(self, operand):
        """The value of a combo operand."""
        if 0 <= operand <= 3:
            return operand
        if operand == 4:
            return self.a
        if operand == 5:
            return self.b
        if operand == 6:
            return self.c
        raise ValueError(f"unknown combo operand {operand}")

    def with_a(self, a):
        """A copy with register A replaced and no outputs."""
        return replace(self, a=a, program=list(self.program), outputs=[])

    def output_text(self):
        """The outputs joined with commas."""
        return ",".join(str(value) for value in self.outputs)


def parse_computer(text):
    """Parse 'Register X: n' lines and a 'Program: ...' line."""
    registers = []
    program = []
    for line in text.splitlines():
        if not line:
            continue
        if line.startswith("Register"):
            registers.append(int(line.split()[-1]))
        if line.startswith("Program"):
            program = [int(x) for x in line.split()[-1].split(",")]
    if len(registers) < 3:
        raise ValueError("expected three registers")
    return Computer(a=registers[0], b=registers[1], c=registers[2], program=program)


def part1(text):
    """The program's output, comma separated."""
    computer = parse_computer(text)
    computer.run()
    return computer.output_text()


def part2(text):
    """Lowest register A value that makes the program print itself, or None."""
    initial = parse_computer(text)
    expected = initial.program
    queue = deque([(0, 1)])
    while queue:
        test_a, digits = queue.popleft()
        tail = expected[len(expected) - digits:]
        for i in range(8):
            next_a = (test_a << 3) + i
            output = initial.with_a(next_a).run()
            if output[len(output) - len(tail):] == tail and len(output) >= len(tail):
                if digits == len(expected):
                    return next_a
                queue.append((next_a, digits + 1))
    return None