import pytest

from microkit.ls import (
    LsFlags,
    find_star_matches,
    format_names,
    list_directory,
    main,
    parse_flags,
)


@pytest.fixture
def sample_dir(tmp_path):
    for name in ("main.c", "ls.c", "readme", ".hidden"):
        (tmp_path / name).write_text("x")
    return tmp_path


def test_parse_flags_both():
    assert parse_flags("-al") == LsFlags(show_all=True, long_format=True)


def test_parse_flags_single():
    assert parse_flags("-l") == LsFlags(show_all=False, long_format=True)


def test_parse_flags_plain_argument():
    assert parse_flags("*.c") == LsFlags()


def test_parse_flags_rejects_unknown():
    with pytest.raises(ValueError):
        parse_flags("-ax")


def test_list_directory_hides_dotfiles(sample_dir):
    names = list_directory(str(sample_dir))
    assert set(names) == {"main.c", "ls.c", "readme"}


def test_list_directory_show_all(sample_dir):
    names = list_directory(str(sample_dir), show_all=True)
    assert set(names) == {".", "..", ".hidden", "main.c", "ls.c", "readme"}


def test_list_directory_long_format(sample_dir):
    names = list_directory(str(sample_dir), long_format=True)
    assert names[1::2] == ["\n"] * 3
    assert set(names[0::2]) == {"main.c", "ls.c", "readme"}


def test_list_directory_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        list_directory(str(tmp_path / "absent"))


NAMES = ["main.c", "ls.c", "readme"]


@pytest.mark.parametrize("pattern", [None, "", "*"])
def test_star_matches_everything(pattern):
    assert find_star_matches(NAMES, pattern) == NAMES


def test_star_matches_suffix_text():
    assert find_star_matches(NAMES, "*.c") == ["main.c", "ls.c"]


def test_star_matches_prefix_text():
    assert find_star_matches(NAMES, "ma*") == ["main.c"]


def test_star_matches_without_star():
    with pytest.raises(ValueError):
        find_star_matches(NAMES, "main.c")


def test_format_names():
    assert format_names(["a", "b"]) == "a b "
    assert format_names([]) == ""


def test_main_pattern(sample_dir, monkeypatch, capsys):
    monkeypatch.chdir(sample_dir)
    assert main(["*.c"]) == 0
    assert sorted(capsys.readouterr().out.split()) == ["ls.c", "main.c"]


def test_main_no_arguments(sample_dir, monkeypatch, capsys):
    monkeypatch.chdir(sample_dir)
    assert main([]) == 0
    assert sorted(capsys.readouterr().out.split()) == ["ls.c", "main.c", "readme"]


def test_main_long_format(sample_dir, monkeypatch, capsys):
    monkeypatch.chdir(sample_dir)
    assert main(["-l"]) == 0
    out = capsys.readouterr().out
    assert out.count("\n") == 3


def test_main_bad_flag(sample_dir, monkeypatch, capsys):
    monkeypatch.chdir(sample_dir)
    assert main(["-z"]) == 1
    assert "Not recognized command" in capsys.readouterr().err