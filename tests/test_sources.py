"""Tests for the local source loader."""

import pytest

from componentgraph.config_runtime import load_runtime_config
from componentgraph.exceptions import SourceLoadError
from componentgraph.sources import load_source_files


def test_filters_extensions_and_ignored_dirs(write_project):
    root = write_project({
        "src/App.tsx": "export const App = () => null;",
        "src/latest.ts": "export const latest = 1;",
        "src/styles.css": ".app {}",
        "node_modules/lib/index.js": "export const lib = 1;",
        "tests/App.test.tsx": "test('x', () => {});",
        ".storybook/main.js": "export default {};",
        "src/.hidden.ts": "export const hidden = 1;",
    })

    files = load_source_files(root)

    assert [f.path for f in files] == ["src/App.tsx", "src/latest.ts"]
    assert files[0].name == "App.tsx"
    assert files[0].raw_text == "export const App = () => null;"


def test_sorted_traversal_is_deterministic(write_project):
    root = write_project({
        "b/Two.jsx": "export const Two = () => null;",
        "a/One.jsx": "export const One = () => null;",
        "Zero.js": "export const zero = 0;",
    })
    assert [f.path for f in load_source_files(root)] == ["Zero.js", "a/One.jsx", "b/Two.jsx"]


def test_max_files_and_depth(write_project):
    root = write_project({
        "a.ts": "export const a = 1;",
        "b.ts": "export const b = 1;",
        "c.ts": "export const c = 1;",
        "d1/d2/deep.ts": "export const deep = 1;",
    })
    cfg = load_runtime_config(root)

    cfg["sources"]["max_files"] = 2
    assert [f.path for f in load_source_files(root, cfg)] == ["a.ts", "b.ts"]

    cfg["sources"]["max_files"] = 200
    cfg["sources"]["max_depth"] = 2
    assert "d1/d2/deep.ts" not in [f.path for f in load_source_files(root, cfg)]


def test_skips_undecodable_and_empty_files(write_project, tmp_path):
    root = write_project({"ok.ts": "export const ok = 1;", "empty.ts": ""})
    (tmp_path / "binary.ts").write_bytes(b"\xff\xfe\x00\x81")

    assert [f.path for f in load_source_files(root)] == ["ok.ts"]


def test_missing_root_raises(tmp_path):
    with pytest.raises(SourceLoadError):
        load_source_files(tmp_path / "nope")
