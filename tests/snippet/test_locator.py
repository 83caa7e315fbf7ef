from snippet_checker.snippet.locator import locate_block


SOURCE = """use std::io;

fn main() {
    let x = 1;
    // explain the next line

    let y = 2;
}
"""


def test_locate_block_skips_comments_inside_the_run():
    block = locate_block(SOURCE, "let x = 1;\nlet y = 2;", path="lib.rs")

    assert block is not None
    assert block.start_line == 4
    assert block.code == "    let x = 1;\n    let y = 2;"
    assert block.path == "lib.rs"


def test_locate_block_counts_meaningful_lines_only():
    block = locate_block(SOURCE, "fn main() {\nlet x = 1;\nlet y = 2;\n}")

    assert block is not None
    assert block.start_line == 3
    assert block.code.splitlines() == ["fn main() {", "    let x = 1;", "    let y = 2;", "}"]


def test_locate_block_without_anchor_returns_none():
    assert locate_block(SOURCE, "let z = 3;") is None


def test_locate_block_returns_none_when_file_ends_early():
    assert locate_block("fn f() {}\nlet x = 1;\n", "let x = 1;\nlet y = 2;") is None


def test_locate_block_uses_first_anchor_only():
    text = "let x = 1;\nlet z = 0;\nlet x = 1;\nlet y = 2;\n"

    block = locate_block(text, "let x = 1;\nlet y = 2;")

    assert block is not None
    assert block.start_line == 1
    assert block.code == "let x = 1;\nlet z = 0;"


def test_locate_block_with_empty_snippet_returns_none():
    assert locate_block(SOURCE, "") is None
