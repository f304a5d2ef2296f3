"""
Entry points used by the puzzle dispatcher.

Both take the raw instruction lines and return the accumulator value.
"""

from typing import Iterable

from .analysis.debugger import BootDebugger
from .analysis.repair import find_repair
from .core.program import parse_program


def accumulator_value_before_repeated_instruction(lines: Iterable[str]) -> int:
    """
    Run the boot code until an instruction is about to run a second time.

    Args:
        lines: One instruction per line, e.g. "jmp +4"

    Returns:
        The accumulator value before the repeated instruction (or at
        termination, for a program that never loops)

    Raises:
        ParseError: If a line is not a valid instruction
        OutOfRangeError: If a jump leaves the program
    """
    program = parse_program(lines)
    return BootDebugger(program).accumulator_before_repeated_instruction()


def accumulator_value_after_termination_of_fixed_instructions(lines: Iterable[str]) -> int:
    """
    Repair the boot code by toggling one nop/jmp and run it to termination.

    Args:
        lines: One instruction per line

    Returns:
        The accumulator value after the repaired program terminates

    Raises:
        ParseError: If a line is not a valid instruction
        NoFixFound: If no single toggle makes the program terminate
    """
    program = parse_program(lines)
    return find_repair(program).accumulator
