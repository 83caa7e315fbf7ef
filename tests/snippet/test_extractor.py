import types

from snippet_checker.snippet.extractor import extract_snippets, strip_blockquotes


CHAPTER = """# Chain backend

The chain state is stored behind a trait:

```rust
# // Path: floresta-chain/src/lib.rs
let x = 1;
let y = 2;
```

And a second example:

```rust
# // Path: floresta-chain/src/pruned_utreexo/mod.rs
pub trait BlockchainInterface {
    fn get_block_hash(&self, height: u32) -> Result<BlockHash, Self::Error>;
}
```
"""


def test_extract_snippets_in_document_order():
    snippets = list(extract_snippets(CHAPTER))

    assert [snippet.index for snippet in snippets] == [0, 1]
    assert snippets[0].path == "floresta-chain/src/lib.rs"
    assert snippets[0].code == "let x = 1;\nlet y = 2;"
    assert snippets[1].path == "floresta-chain/src/pruned_utreexo/mod.rs"
    assert snippets[1].code.startswith("pub trait BlockchainInterface {")
    assert snippets[1].code.endswith("}")


def test_extract_snippets_is_lazy():
    assert isinstance(extract_snippets(CHAPTER), types.GeneratorType)


def test_fences_without_path_marker_are_ignored():
    text = "```rust\nlet x = 1;\n```\n\n```rust\n// Path: a.rs\nlet x = 1;\n```\n"

    assert list(extract_snippets(text)) == []


def test_document_without_fences_yields_nothing():
    assert list(extract_snippets("# Title\n\nJust prose.\n")) == []


def test_other_languages_need_their_tag():
    text = "```toml\n# // Path: Cargo.toml\n[package]\n```\n"

    assert list(extract_snippets(text)) == []
    snippets = list(extract_snippets(text, language="toml"))
    assert [(snippet.path, snippet.code) for snippet in snippets] == [("Cargo.toml", "[package]")]


def test_snippets_inside_blockquotes_are_found():
    text = "> Note:\n>\n> ```rust\n> # // Path: node/src/lib.rs\n> let x = 1;\n> ```\n"

    snippets = list(extract_snippets(text))

    assert len(snippets) == 1
    assert snippets[0].path == "node/src/lib.rs"
    assert snippets[0].code == "let x = 1;"


def test_body_stops_at_first_closing_fence():
    text = (
        "```rust\n# // Path: a.rs\nfn a() {}\n```\n\ntext\n\n"
        "```rust\n# // Path: b.rs\nfn b() {}\n```\n"
    )

    assert [(s.path, s.code) for s in extract_snippets(text)] == [("a.rs", "fn a() {}"), ("b.rs", "fn b() {}")]


def test_strip_blockquotes_only_removes_one_prefix():
    assert strip_blockquotes("> > quoted\n>no space\nplain") == "> quoted\n>no space\nplain"


def test_form_feeds_and_line_separators_stay_in_the_body():
    text = "```rust\n# // Path: a.rs\nlet s = \"\x0c\";\nlet t = \"\u2028\";\n```\n"

    [snippet] = extract_snippets(text)

    assert snippet.code == "let s = \"\x0c\";\nlet t = \"\u2028\";"
