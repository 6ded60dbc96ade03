import pytest

from coursekit.directory import DirectoryIterator, main


def test_nonexisting_directory(tmp_path):
    with pytest.raises(OSError):
        DirectoryIterator(str(tmp_path / "no-such-directory"))


def test_nonexisting_directory_is_file_not_found(tmp_path):
    with pytest.raises(FileNotFoundError):
        DirectoryIterator(str(tmp_path / "no-such-directory"))


def test_empty_directory(tmp_path):
    entries = sorted(DirectoryIterator(str(tmp_path)))
    assert entries == [".", ".."]


def test_nonempty_directory(tmp_path):
    (tmp_path / "foo.txt").write_text("The Foo Diaries\n")
    (tmp_path / "bar.png").write_text("<PNG>\n")
    (tmp_path / "crab.rs").write_text("//! Crab\n")
    entries = sorted(DirectoryIterator(str(tmp_path)))
    assert entries == [".", "..", "bar.png", "crab.rs", "foo.txt"]


def test_accepts_path_objects(tmp_path):
    (tmp_path / "a").write_text("")
    assert sorted(DirectoryIterator(tmp_path)) == [".", "..", "a"]


def test_bytes_path_yields_bytes(tmp_path):
    (tmp_path / "a").write_text("")
    entries = sorted(DirectoryIterator(str(tmp_path).encode()))
    assert entries == [b".", b"..", b"a"]


def test_nul_in_path_is_invalid():
    with pytest.raises(ValueError, match="Invalid path"):
        DirectoryIterator("bad\0path")


def test_file_is_not_a_directory(tmp_path):
    target = tmp_path / "plain.txt"
    target.write_text("x")
    with pytest.raises(OSError):
        DirectoryIterator(str(target))


def test_close_ends_iteration(tmp_path):
    (tmp_path / "a").write_text("")
    with DirectoryIterator(str(tmp_path)) as entries:
        first = next(entries)
    assert first == "."
    with pytest.raises(StopIteration):
        next(entries)


def test_main_lists_directory(tmp_path, capsys):
    (tmp_path / "hello.txt").write_text("")
    assert main([str(tmp_path)]) == 0
    out = capsys.readouterr().out
    assert out.startswith("files: ")
    assert "'hello.txt'" in out


def test_main_reports_missing_directory(tmp_path, capsys):
    assert main([str(tmp_path / "missing")]) == 1
    assert "Could not open" in capsys.readouterr().err