import pytest
from structlog.testing import capture_logs

from bootcode.analysis.repair import find_repair, repair_candidates
from bootcode.core.instruction import Instruction, Operation
from bootcode.core.program import parse_program
from bootcode.errors import NoFixFound


def test_candidates_are_nop_and_jmp_in_order(example_lines):
    program = parse_program(example_lines)
    assert list(repair_candidates(program)) == [0, 2, 4, 7]


def test_example_is_fixed_at_index_7(example_lines):
    """Test that flipping the jmp -4 at index 7 to nop -4 lets the program finish with 8."""
    program = parse_program(example_lines)

    repair = find_repair(program)

    assert repair.index == 7
    assert repair.original == Instruction(Operation.JMP, -4)
    assert repair.replacement == Instruction(Operation.NOP, -4)
    assert repair.accumulator == 8
    assert repair.result.terminated
    assert repair.result.trace == (0, 1, 2, 6, 7, 8)


def test_repair_does_not_modify_program(example_lines):
    program = parse_program(example_lines)
    find_repair(program)
    assert program == parse_program(example_lines)


def test_first_qualifying_candidate_wins():
    """Both toggles terminate here; the lower index is chosen."""
    program = parse_program(["nop +2", "jmp +0", "acc +7"])

    repair = find_repair(program)

    assert repair.index == 0
    assert repair.replacement == Instruction(Operation.JMP, 2)
    assert repair.accumulator == 7


def test_out_of_range_candidate_is_skipped():
    """Toggling index 0 jumps out of the program; the search carries on to index 1."""
    program = parse_program(["nop +5", "jmp +0", "acc +1"])

    repair = find_repair(program)

    assert repair.index == 1
    assert repair.accumulator == 1


def test_no_fix_found():
    program = parse_program(["jmp +0", "jmp +0"])

    with pytest.raises(NoFixFound) as excinfo:
        find_repair(program)

    assert excinfo.value.candidates_tried == 2


def test_acc_only_program_has_no_candidates():
    with pytest.raises(NoFixFound) as excinfo:
        find_repair(parse_program(["acc +1", "acc +2"]))

    assert excinfo.value.candidates_tried == 0


def test_repair_logs_outcome(example_lines):
    with capture_logs() as logs:
        find_repair(parse_program(example_lines))

    found = [entry for entry in logs if entry["event"] == "Found repair"]
    assert len(found) == 1
    assert found[0]["index"] == 7
    assert found[0]["log_level"] == "info"

    rejected = [entry["index"] for entry in logs if entry["event"] == "Rejected repair candidate"]
    assert rejected == [0, 2, 4]


def test_failed_repair_logs_error():
    with capture_logs() as logs:
        with pytest.raises(NoFixFound):
            find_repair(parse_program(["jmp +0", "jmp +0"]))

    errors = [entry for entry in logs if entry["log_level"] == "error"]
    assert errors[0]["event"] == "No repair found"
    assert errors[0]["candidates_tried"] == 2
