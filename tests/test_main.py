import logging

import pytest

import main


@pytest.fixture(autouse=True)
def _reset_logging(monkeypatch):
    for name in ("CODE_DIR", "SNIPPET_BOOK_DIR", "NO_COLOR", "SNIPPET_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    yield
    logger = logging.getLogger("snippet_checker")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def project(tmp_path):
    source = tmp_path / "code" / "crates" / "chain" / "src" / "lib.rs"
    source.parent.mkdir(parents=True)
    source.write_text("fn main() {\n    let x = 1;\n    let y = 2;\n}\n", encoding="utf-8")
    book_dir = tmp_path / "book"
    book_dir.mkdir()
    return tmp_path / "code", book_dir


def _args(code_dir, book_dir, *extra):
    return ["--code-dir", str(code_dir), "--book-dir", str(book_dir), "--no-color", *extra]


def _write_chapter(book_dir, body, path="chain/src/lib.rs", name="ch01.md"):
    (book_dir / name).write_text(f"```rust\n# // Path: {path}\n{body}\n```\n", encoding="utf-8")


def test_matching_book_exits_zero(project, capsys):
    code_dir, book_dir = project
    _write_chapter(book_dir, "let x = 1;\nlet y = 2;")
    (book_dir / "ch02.md").write_text("No code.\n", encoding="utf-8")

    assert main.main(_args(code_dir, book_dir)) == main.EXIT_OK

    out = capsys.readouterr().out
    assert "ch01.md ... ok" in out
    assert "ch02.md ... no snippets" in out
    assert "Final status: OK" in out


def test_mismatch_exits_one_and_prints_diff(project, capsys):
    code_dir, book_dir = project
    _write_chapter(book_dir, "let x = 1;\nlet y = 3;")

    assert main.main(_args(code_dir, book_dir, "--log-level", "ERROR")) == main.EXIT_DIFF

    out = capsys.readouterr().out
    assert "ch01.md ... DIFF" in out
    assert "Code: chain/src/lib.rs:2" in out
    assert "- let y = 3;" in out
    assert "+ let y = 2;" in out
    assert "Final status: DIFF FOUND" in out


def test_missing_snippet_path_is_fatal(project, capsys):
    code_dir, book_dir = project
    _write_chapter(book_dir, "let x = 1;", path="chain/src/missing.rs")

    assert main.main(_args(code_dir, book_dir, "--log-level", "CRITICAL")) == main.EXIT_FATAL

    out = capsys.readouterr().out
    assert "does not exist - chain/src/missing.rs" in out
    assert "Final status" not in out


def test_code_dir_from_environment(project, monkeypatch, capsys):
    code_dir, book_dir = project
    _write_chapter(book_dir, "let x = 1;\nlet y = 2;")
    monkeypatch.setenv("CODE_DIR", str(code_dir))

    assert main.main(["--book-dir", str(book_dir), "--no-color"]) == main.EXIT_OK


def test_missing_code_dir_is_fatal(project, capsys):
    _, book_dir = project

    assert main.main(["--book-dir", str(book_dir), "--no-color", "--log-level", "CRITICAL"]) == main.EXIT_FATAL
    assert "CODE_DIR environment variable is not set" in capsys.readouterr().out


def test_source_that_is_not_utf8_exits_fatal(project, capsys):
    code_dir, book_dir = project
    (code_dir / "crates" / "chain" / "src" / "lib.rs").write_bytes(b"let x = 1;\n\xff\xfe\n")
    _write_chapter(book_dir, "let x = 1;")

    assert main.main(_args(code_dir, book_dir, "--log-level", "CRITICAL")) == main.EXIT_FATAL

    out = capsys.readouterr().out
    assert "not valid UTF-8" in out
    assert "Document: ch01.md" in out


def test_fatal_error_still_prints_earlier_diffs_and_document(project, capsys):
    code_dir, book_dir = project
    (book_dir / "bad_chapter.md").write_text(
        "```rust\n# // Path: chain/src/lib.rs\nlet x = 1;\nlet y = 3;\n```\n\n"
        "```rust\n# // Path: chain/src/missing.rs\nlet z = 0;\n```\n",
        encoding="utf-8",
    )

    assert main.main(_args(code_dir, book_dir, "--log-level", "CRITICAL")) == main.EXIT_FATAL

    out = capsys.readouterr().out
    assert "bad_chapter.md ... DIFF" in out
    assert "- let y = 3;" in out
    assert "+ let y = 2;" in out
    assert "Error: File path read from snippet 1 does not exist - chain/src/missing.rs" in out
    assert "Document: bad_chapter.md" in out
