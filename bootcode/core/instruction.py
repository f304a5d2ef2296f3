"""
Boot code instruction definitions and the single-line parser.
"""

import re
from dataclasses import dataclass
from enum import Enum

from ..errors import ParseError

# "<mnemonic> <signed argument>", e.g. "jmp +4" or "acc -99"
INSTRUCTION_PATTERN = re.compile(r"^(?P<operation>[a-z]{3}) (?P<argument>[+-][0-9]+)$")


class Operation(Enum):
    """Boot code operations, keyed by their mnemonic."""

    NOP = "nop"
    ACC = "acc"
    JMP = "jmp"


# Operations that can be swapped for one another when repairing a program
TOGGLES = {
    Operation.NOP: Operation.JMP,
    Operation.JMP: Operation.NOP,
}


@dataclass(frozen=True)
class Instruction:
    operation: Operation
    argument: int

    @property
    def toggleable(self) -> bool:
        return self.operation in TOGGLES

    def toggled(self) -> "Instruction":
        """Return a copy with nop and jmp swapped; acc cannot be toggled."""
        if not self.toggleable:
            raise ValueError(f"Cannot toggle instruction '{self}'")
        return Instruction(TOGGLES[self.operation], self.argument)

    def __str__(self) -> str:
        return f"{self.operation.value} {self.argument:+d}"


def parse_instruction(line: str) -> Instruction:
    """
    Parse one line of boot code.

    Args:
        line: Text of the form "<nop|acc|jmp> <+N|-N>"

    Returns:
        The parsed Instruction

    Raises:
        ParseError: If the mnemonic is unknown or the argument is not a signed integer
    """
    match = INSTRUCTION_PATTERN.match(line.strip())
    if match is None:
        raise ParseError(f"Could not parse boot instruction from '{line}'", line)

    mnemonic = match.group("operation")
    try:
        operation = Operation(mnemonic)
    except ValueError:
        raise ParseError(
            f"Could not parse boot operation from '{mnemonic}'", line
        ) from None

    return Instruction(operation, int(match.group("argument")))
