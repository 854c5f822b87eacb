import pytest


SCENARIO_TEXT = (
    "This is a test of the reflow text function. This text should be\n"
    "broken into multiple lines if the word limit is set to a small\n"
    "value. This line is intentionally short."
)

SCENARIO_MERGED = (
    "This is a test of the reflow text function. This text should be "
    "broken into multiple lines if the word limit is set to a small "
    "value. This line is intentionally short."
)

SCENARIO_WRAPPED_10 = [
    "This is a",
    "test of",
    "the reflow",
    "text",
    "function.",
    "This text",
    "should be",
    "broken",
    "into",
    "multiple",
    "lines if",
    "the word",
    "limit is",
    "set to a",
    "small",
    "value.",
    "This line",
    "is",
    "intentiona",
    "lly short.",
]


@pytest.fixture
def scenario_text():
    return SCENARIO_TEXT


@pytest.fixture
def scenario_file(tmp_path):
    path = tmp_path / "wrapped.txt"
    path.write_text(SCENARIO_TEXT + "\n", encoding="utf-8")
    return path
