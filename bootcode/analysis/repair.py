"""
Self-healing search: find the single nop/jmp toggle that lets a looping program terminate.
"""

from dataclasses import dataclass
from typing import Iterator

import structlog

from .debugger import BootDebugger, DebugResult
from ..core.instruction import Instruction
from ..core.program import Program
from ..errors import NoFixFound, OutOfRangeError, ProgramDidNotTerminate

logger = structlog.get_logger()


@dataclass(frozen=True)
class RepairResult:
    index: int
    original: Instruction
    replacement: Instruction
    result: DebugResult

    @property
    def accumulator(self) -> int:
        return self.result.accumulator


def repair_candidates(program: Program) -> Iterator[int]:
    """Indices of every nop and jmp, in program order. acc is never a candidate."""
    for index, instruction in enumerate(program):
        if instruction.toggleable:
            yield index


def find_repair(program: Program) -> RepairResult:
    """
    Try each nop/jmp toggle in ascending index order and return the first that terminates.

    Each attempt runs a fresh debugger over its own copy of the program. An
    attempt that repeats an instruction or jumps out of range is rejected and
    the search moves on.

    Args:
        program: A program that loops forever as given

    Returns:
        RepairResult for the first toggle whose run terminates cleanly

    Raises:
        NoFixFound: If no toggle produces a terminating run
    """
    tried = 0
    for index in repair_candidates(program):
        tried += 1
        candidate = program.toggled(index)
        try:
            result = BootDebugger(candidate).execute_to_termination()
        except (ProgramDidNotTerminate, OutOfRangeError) as e:
            logger.debug("Rejected repair candidate", index=index, error=str(e))
            continue

        logger.info(
            "Found repair",
            index=index,
            original=str(program[index]),
            replacement=str(candidate[index]),
            accumulator=result.accumulator,
        )
        return RepairResult(
            index=index,
            original=program[index],
            replacement=candidate[index],
            result=result,
        )

    logger.error("No repair found", candidates_tried=tried, program_length=len(program))
    raise NoFixFound(tried)
