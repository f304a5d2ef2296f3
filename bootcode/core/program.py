# core/program.py

from dataclasses import dataclass
from typing import Iterable, Iterator, Tuple

from .instruction import Instruction, parse_instruction
from ..errors import ParseError


@dataclass(frozen=True)
class Program:
    """
    An ordered, immutable sequence of boot code instructions.

    Repair attempts never edit a Program in place; `toggled` returns a new
    Program that differs from this one at a single index.
    """

    instructions: Tuple[Instruction, ...] = ()

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "Program":
        return parse_program(lines)

    def __len__(self) -> int:
        return len(self.instructions)

    def __getitem__(self, index: int) -> Instruction:
        return self.instructions[index]

    def __iter__(self) -> Iterator[Instruction]:
        return iter(self.instructions)

    def toggled(self, index: int) -> "Program":
        """
        Create a copy of the program with the nop/jmp at `index` swapped.

        Args:
            index: Position of the instruction to toggle

        Returns:
            A new Program; this one is left unchanged

        Raises:
            IndexError: If index is outside the program
            ValueError: If the instruction at index is an acc
        """
        if not 0 <= index < len(self.instructions):
            raise IndexError(f"No instruction at index {index}")
        altered = list(self.instructions)
        altered[index] = altered[index].toggled()
        return Program(tuple(altered))

    def listing(self) -> str:
        return "\n".join(str(instruction) for instruction in self.instructions)


def parse_program(lines: Iterable[str]) -> Program:
    """Parse every line in order; the first bad line raises ParseError with its index."""
    instructions = []
    for line_number, line in enumerate(lines):
        try:
            instructions.append(parse_instruction(line))
        except ParseError as e:
            raise ParseError(str(e), line, line_number=line_number) from e
    return Program(tuple(instructions))
