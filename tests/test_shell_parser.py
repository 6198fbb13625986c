import pytest

from microkit.shell_parser import (
    LineKind,
    ParseError,
    RedirectMode,
    parse_line,
    split_tokens,
    trim,
)


def test_split_tokens_skips_repeated_and_leading_delimiters():
    assert split_tokens("  ls  -l /tmp", " ") == ["ls", "-l", "/tmp"]


def test_split_tokens_empty_text():
    assert split_tokens("", " ") == []


def test_split_tokens_multi_char_delims_split_on_each_char():
    assert split_tokens("cmd >> file", ">>") == ["cmd ", " file"]


def test_trim_removes_only_one_character_each_side():
    assert trim(" x ") == "x"
    assert trim("  x") == " x"
    assert trim("x\n") == "x"
    assert trim("") == ""


def test_pipe_line():
    parsed = parse_line("ls -l | wc -l")
    assert parsed.kind is LineKind.PIPE
    assert parsed.commands == [["ls", "-l"], ["wc", "-l"]]


def test_pipe_takes_precedence_over_redirect():
    parsed = parse_line("echo a > b | cat")
    assert parsed.kind is LineKind.PIPE
    assert parsed.commands == [["echo", "a", ">", "b"], ["cat"]]


def test_background_line():
    parsed = parse_line("sleep 1 & echo hi")
    assert parsed.kind is LineKind.BACKGROUND
    assert parsed.commands == [["sleep", "1"], ["echo", "hi"]]


@pytest.mark.parametrize(
    "line, mode",
    [
        ("echo hi >> out.txt", RedirectMode.APPEND),
        ("echo hi > out.txt", RedirectMode.STD_OUT),
        ("echo hi < out.txt", RedirectMode.STD_IN),
    ],
)
def test_redirect_lines(line, mode):
    parsed = parse_line(line)
    assert parsed.kind is LineKind.REDIRECT
    assert parsed.mode is mode
    assert parsed.path == "out.txt"
    assert parsed.argv == ["echo", "hi"]


def test_redirect_mode_values_match_stream_numbers():
    assert parse_line("cat < f").mode == 0
    assert parse_line("cat > f").mode == 1
    assert parse_line("cat >> f").mode == 2


def test_redirect_with_wrong_part_count_raises():
    with pytest.raises(ParseError, match="Wrong input"):
        parse_line("a > b > c")


def test_redirect_without_file_raises():
    with pytest.raises(ParseError):
        parse_line("echo hi >")


@pytest.mark.parametrize(
    "line, kind",
    [
        ("cd /tmp", LineKind.CD),
        ("abcd x", LineKind.CD),
        ("exit", LineKind.EXIT),
        ("myexit", LineKind.EXIT),
        ("echo hi", LineKind.COMMAND),
    ],
)
def test_plain_lines(line, kind):
    parsed = parse_line(line)
    assert parsed.kind is kind
    assert parsed.argv == line.split()


def test_blank_line_raises():
    with pytest.raises(ParseError):
        parse_line("   ")