"""
Loop detection for boot code.

The debugger drives an Executor one instruction at a time and records every
index it runs. A run halts on the first of:

- the cursor points at an index that has already run (HaltedOnRepeat)
- the cursor sits one past the last instruction (HaltedOnTermination)

Every index runs at most once, so a program of N instructions halts after at
most N steps.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Set, Tuple

import structlog

from ..core.executor import ExecutionState, Executor
from ..core.program import Program
from ..errors import ProgramDidNotTerminate

logger = structlog.get_logger()


class HaltReason(Enum):
    REPEATED_INSTRUCTION = "repeated_instruction"
    TERMINATED = "terminated"


@dataclass(frozen=True)
class DebugResult:
    """Outcome of one debugger run."""

    reason: HaltReason
    state: ExecutionState
    trace: Tuple[int, ...]  # Indices in the order they ran

    @property
    def accumulator(self) -> int:
        return self.state.accumulator

    @property
    def cursor(self) -> int:
        return self.state.cursor

    @property
    def steps(self) -> int:
        return len(self.trace)

    @property
    def terminated(self) -> bool:
        return self.reason is HaltReason.TERMINATED


class ExecutionHistory:
    """Indices visited during a single run, in order and as a set."""

    def __init__(self):
        self._order: List[int] = []
        self._seen: Set[int] = set()

    def record(self, index: int) -> None:
        if index in self._seen:
            raise ValueError(f"Index {index} already recorded")
        self._order.append(index)
        self._seen.add(index)

    def __contains__(self, index: int) -> bool:
        return index in self._seen

    def __len__(self) -> int:
        return len(self._order)

    def trace(self) -> Tuple[int, ...]:
        return tuple(self._order)


class BootDebugger:
    def __init__(self, program: Program):
        self.program = program

    def run(self) -> DebugResult:
        """
        Run the program from a fresh state until it repeats an instruction or terminates.

        Returns:
            DebugResult describing why and where the run halted

        Raises:
            OutOfRangeError: If a jump leaves the program anywhere other than
                exactly one past its end
        """
        executor = Executor(self.program)
        history = ExecutionHistory()

        while True:
            cursor = executor.cursor
            if cursor in history:
                reason = HaltReason.REPEATED_INSTRUCTION
                break
            if executor.terminated:
                reason = HaltReason.TERMINATED
                break
            history.record(cursor)
            executor.step()

        result = DebugResult(reason=reason, state=executor.state, trace=history.trace())
        logger.debug(
            "Debugger halted",
            reason=reason.value,
            cursor=result.cursor,
            accumulator=result.accumulator,
            steps=result.steps,
        )
        return result

    def accumulator_before_repeated_instruction(self) -> int:
        """Accumulator value at the moment any instruction would run a second time."""
        return self.run().accumulator

    def execute_to_termination(self) -> DebugResult:
        """
        Run the program and require clean termination.

        Raises:
            ProgramDidNotTerminate: If the run halts on a repeated instruction
        """
        result = self.run()
        if not result.terminated:
            raise ProgramDidNotTerminate(result.cursor, result.accumulator)
        return result
