from textreflow.convert.merge import merge_lines


def test_empty_input():
    assert merge_lines([], 0.0, 0.9) == ""


def test_lines_joined_with_single_space():
    assert merge_lines(["one", "two", "three"], 50.0, 0.9) == "one two three"


def test_break_closes_paragraph():
    lines = ["a b c d e f g h", "Short.", "next line here"]
    assert merge_lines(lines, 20.0, 0.9) == "a b c d e f g h Short.\nnext line here"


def test_break_on_first_line():
    assert merge_lines(["Hi.", "there"], 20.0, 0.9) == "Hi.\nthere"


def test_break_on_last_line_keeps_newline():
    assert merge_lines(["abc", "End."], 20.0, 0.9) == "abc End.\n"


def test_blank_lines_are_absorbed():
    lines = ["Hello there", "", "General text"]
    assert merge_lines(lines, 10.0, 0.9) == "Hello there  General text"


def test_line_text_is_kept_untrimmed():
    assert merge_lines(["  indented.", "next"], 20.0, 0.9) == "  indented.\nnext"
