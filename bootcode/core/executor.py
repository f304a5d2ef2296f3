"""
Single-step execution of boot code.
"""

from dataclasses import dataclass
from typing import Optional

from .instruction import Operation
from .program import Program
from ..errors import OutOfRangeError


@dataclass(frozen=True)
class ExecutionState:
    """Cursor of the next instruction and the accumulator value."""

    cursor: int = 0
    accumulator: int = 0


def is_terminated(state: ExecutionState, program: Program) -> bool:
    """Clean termination: the cursor sits exactly one past the last instruction."""
    return state.cursor == len(program)


def apply_next(state: ExecutionState, program: Program) -> ExecutionState:
    """
    Apply the instruction under the cursor.

    Args:
        state: State before the step
        program: Program being executed

    Returns:
        The state after the step

    Raises:
        OutOfRangeError: If the cursor does not index an instruction. This
            includes the terminated position, which has nothing left to run.
    """
    if not 0 <= state.cursor < len(program):
        raise OutOfRangeError(state.cursor, len(program))

    instruction = program[state.cursor]
    if instruction.operation is Operation.JMP:
        return ExecutionState(state.cursor + instruction.argument, state.accumulator)
    if instruction.operation is Operation.ACC:
        return ExecutionState(state.cursor + 1, state.accumulator + instruction.argument)
    return ExecutionState(state.cursor + 1, state.accumulator)


class Executor:
    def __init__(self, program: Program, state: Optional[ExecutionState] = None):
        self.program = program
        self.state = state if state is not None else ExecutionState()

    @property
    def cursor(self) -> int:
        return self.state.cursor

    @property
    def accumulator(self) -> int:
        return self.state.accumulator

    @property
    def terminated(self) -> bool:
        return is_terminated(self.state, self.program)

    def step(self) -> ExecutionState:
        # apply_next raises before anything changes, so a failed step leaves state intact
        self.state = apply_next(self.state, self.program)
        return self.state
