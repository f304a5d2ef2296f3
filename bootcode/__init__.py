"""
Boot code parser, debugger and repair search.
"""

# Core types
from .core.instruction import Instruction, Operation, parse_instruction
from .core.program import Program, parse_program
from .core.executor import ExecutionState, Executor, apply_next, is_terminated

# Analysis
from .analysis.debugger import BootDebugger, DebugResult, HaltReason
from .analysis.repair import RepairResult, find_repair, repair_candidates

# Entry points
from .api import (
    accumulator_value_before_repeated_instruction,
    accumulator_value_after_termination_of_fixed_instructions,
)

# Errors
from .errors import (
    BootCodeError,
    ParseError,
    OutOfRangeError,
    ProgramDidNotTerminate,
    NoFixFound,
)

# Configuration
from .config import LoggingSettings
from .utils.logging_setup import configure_logging


__all__ = [
    # Core
    "Instruction",
    "Operation",
    "parse_instruction",
    "Program",
    "parse_program",
    "ExecutionState",
    "Executor",
    "apply_next",
    "is_terminated",
    # Analysis
    "BootDebugger",
    "DebugResult",
    "HaltReason",
    "RepairResult",
    "find_repair",
    "repair_candidates",
    # Entry points
    "accumulator_value_before_repeated_instruction",
    "accumulator_value_after_termination_of_fixed_instructions",
    # Errors
    "BootCodeError",
    "ParseError",
    "OutOfRangeError",
    "ProgramDidNotTerminate",
    "NoFixFound",
    # Configuration
    "LoggingSettings",
    "configure_logging",
]
