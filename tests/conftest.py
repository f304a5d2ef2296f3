import pytest

EXAMPLE_LINES = [
    "nop +0",
    "acc +1",
    "jmp +4",
    "acc +3",
    "jmp -3",
    "acc -99",
    "acc +1",
    "jmp -4",
    "acc +6",
]


@pytest.fixture
def example_lines():
    """The sample boot code: loops at index 1 and is fixed by toggling index 7."""
    return list(EXAMPLE_LINES)
