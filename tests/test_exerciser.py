import io
import json

from coursekit.exerciser import main, process, process_all

CODE = "fn main() {\n    println!(\"hi\");\n}\n"


def _doc(filename, code=CODE):
    return f"# Title\n\n<!-- File {filename} -->\n\n```rust\n{code}```\n"


def test_process_writes_named_code_block(tmp_path):
    process(tmp_path, _doc("src/main.rs"))
    assert (tmp_path / "src" / "main.rs").read_text() == CODE


def test_process_ignores_code_without_comment(tmp_path):
    process(tmp_path, "Some text\n\n```rust\nfn f() {}\n```\n")
    assert list(tmp_path.iterdir()) == []


def test_process_ignores_unrelated_comments(tmp_path):
    process(tmp_path, "<!-- just a note -->\n\n```\nx\n```\n")
    assert list(tmp_path.iterdir()) == []


def test_comment_applies_to_next_code_block_only(tmp_path):
    text = (
        "<!-- File a.txt -->\n\nA paragraph.\n\n```\nfirst\n```\n\n"
        "```\nsecond\n```\n"
    )
    process(tmp_path, text)
    assert (tmp_path / "a.txt").read_text() == "first\n"
    assert [p.name for p in tmp_path.iterdir()] == ["a.txt"]


def test_process_multiple_files(tmp_path):
    text = _doc("one.rs", "1\n") + "\n" + _doc("two.rs", "2\n")
    process(tmp_path, text)
    assert (tmp_path / "one.rs").read_text() == "1\n"
    assert (tmp_path / "two.rs").read_text() == "2\n"


def test_process_overwrites_existing_file(tmp_path):
    target = tmp_path / "x.rs"
    target.write_text("old contents that are longer\n")
    process(tmp_path, _doc("x.rs", "new\n"))
    assert target.read_text() == "new\n"


def _book(*chapters):
    return {
        "sections": [
            {"Chapter": chapter} for chapter in chapters
        ]
        + ["Separator"]
    }


def _chapter(path, content, sub_items=()):
    return {
        "name": "chapter",
        "content": content,
        "number": None,
        "sub_items": list(sub_items),
        "path": path,
        "source_path": path,
        "parent_names": [],
    }


def test_process_all_uses_chapter_stem(tmp_path):
    nested = _chapter("exercises/day-2/luhn.md", _doc("src/lib.rs"))
    parent = _chapter("exercises/day-2.md", "no code here\n", [{"Chapter": nested}])
    process_all(_book(parent), tmp_path)
    assert (tmp_path / "luhn" / "src" / "lib.rs").read_text() == CODE
    assert not (tmp_path / "day-2").exists()


def test_process_all_skips_draft_chapters(tmp_path):
    process_all(_book(_chapter(None, _doc("a.rs"))), tmp_path)
    assert list(tmp_path.iterdir()) == []


def test_main_renders_book(tmp_path, monkeypatch):
    out = tmp_path / "out"
    out.mkdir()
    (out / "stale.txt").write_text("stale")
    context = {
        "version": "0.4.25",
        "root": str(tmp_path),
        "book": _book(_chapter("intro.md", _doc("main.rs"))),
        "config": {"output": {"exerciser": {"output-directory": str(out)}}},
        "destination": str(tmp_path),
    }
    monkeypatch.setattr("sys.stdin", io.StringIO(json.dumps(context)))
    assert main([]) == 0
    assert (out / "intro" / "main.rs").read_text() == CODE
    assert not (out / "stale.txt").exists()


def test_main_missing_config(tmp_path, monkeypatch, capsys):
    context = {"book": {"sections": []}, "config": {"output": {}}}
    monkeypatch.setattr("sys.stdin", io.StringIO(json.dumps(context)))
    assert main([]) == 1
    assert "Missing output.exerciser configuration" in capsys.readouterr().err


def test_main_non_string_directory(monkeypatch, capsys):
    context = {"config": {"output": {"exerciser": {"output-directory": 3}}}}
    monkeypatch.setattr("sys.stdin", io.StringIO(json.dumps(context)))
    assert main([]) == 1
    assert "Expected a string" in capsys.readouterr().err


def test_main_bad_json(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("{not json"))
    assert main([]) == 1
    assert "Parsing stdin" in capsys.readouterr().err