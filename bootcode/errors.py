"""
Exception types raised while parsing, running and repairing boot code.
"""

from typing import Optional


class BootCodeError(Exception):
    """Base class for every boot code failure."""
    pass


class ParseError(BootCodeError, ValueError):
    """Raised when a line is not a valid boot code instruction."""

    def __init__(self, message: str, line: str, line_number: Optional[int] = None):
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.line = line
        self.line_number = line_number


class OutOfRangeError(BootCodeError, IndexError):
    """Raised when the cursor does not point at an instruction of the program."""

    def __init__(self, cursor: int, program_length: int):
        super().__init__(
            f"Attempted to access instruction {cursor} of a program with {program_length} instructions"
        )
        self.cursor = cursor
        self.program_length = program_length


class ProgramDidNotTerminate(BootCodeError):
    """Raised when a run revisits an instruction instead of terminating."""

    def __init__(self, cursor: int, accumulator: int):
        super().__init__(
            f"Program repeated instruction {cursor} before terminating (accumulator={accumulator})"
        )
        self.cursor = cursor
        self.accumulator = accumulator


class NoFixFound(BootCodeError):
    """Raised when no single nop/jmp toggle makes the program terminate."""

    def __init__(self, candidates_tried: int):
        super().__init__(
            f"Did not find a fixed version of the program after trying {candidates_tried} candidates"
        )
        self.candidates_tried = candidates_tried
