"""Shared pytest fixtures."""

import json
import os
from pathlib import Path

import pytest


def _highlighted(text, *spans):
    return {"text": text, "highlights": [{"start": s, "end": e} for s, e in spans]}


def _pos(line, byte, column=0):
    return {"byte": byte, "line": line, "column": column}


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Run every test from an empty directory with no SEARCHVIEW_* overrides."""
    for key in list(os.environ):
        if key.startswith("SEARCHVIEW_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    yield tmp_path


@pytest.fixture
def write_json(tmp_path):
    """Write a JSON document to a temp file and return its path."""

    def _write(document, name="input.json") -> str:
        path = Path(tmp_path) / name
        path.write_text(json.dumps(document), encoding="utf-8")
        return str(path)

    return _write


@pytest.fixture
def repo_record():
    return {
        "kind": "repository_result",
        "data": {"name": _highlighted("bloop", (0, 3))},
    }


@pytest.fixture
def code_record():
    return {
        "kind": "snippets",
        "data": {
            "lang": "Rust",
            "relative_path": "server/src/main.rs",
            "repo_name": "bloop",
            "repo_ref": "local/home/dev/bloop",
            "snippets": [
                {
                    "data": "fn main() {\n    run();\n}",
                    "line_range": {"start": 10, "end": 12},
                    "highlights": [{"start": 3, "end": 7}],
                    "symbols": [
                        {
                            "kind": "function",
                            "range": {"start": _pos(10, 120, 3), "end": _pos(10, 124, 7)},
                        }
                    ],
                }
            ],
        },
    }


@pytest.fixture
def file_record():
    return {
        "kind": "file_result",
        "data": {
            "relative_path": _highlighted("client/src/mappers/results.ts", (19, 26)),
            "repo_ref": "github.com/bloopai/bloop",
            "repo_name": "bloop",
            "lang": "TypeScript",
        },
    }


@pytest.fixture
def search_response(repo_record, code_record, file_record):
    """A response with one record of every kind plus an unknown one."""
    return {
        "count": 6,
        "data": [
            repo_record,
            code_record,
            {"kind": "something_new", "data": {"x": 1}},
            file_record,
            {"kind": "flag", "data": "case-sensitive"},
            {"kind": "lang", "data": "Rust"},
        ],
    }


@pytest.fixture
def directory_record():
    return {
        "kind": "dir",
        "data": {
            "repo_name": "bloop",
            "relative_path": "client/src/",
            "repo_ref": "local/bloop",
            "entries": [
                {"name": "utils.ts", "entry_data": {"File": {"lang": "TypeScript"}}},
                {"name": "pages/", "entry_data": "Directory"},
                {"name": "App.tsx", "entry_data": {"File": {"lang": "TSX"}}},
                {"name": "components/", "entry_data": "Directory"},
            ],
        },
    }


@pytest.fixture
def source_file():
    """A cited file with 30 numbered lines."""
    contents = "\n".join(f"line {n}" for n in range(1, 31))
    return {
        "kind": "file",
        "data": {
            "lang": "Python",
            "relative_path": "src/app/main.py",
            "contents": contents,
            "repo_name": "app",
            "repo_ref": "local/app",
            "siblings": [
                {"name": "main.py", "entry_data": {"File": {"lang": "Python"}}, "currentFile": True},
                {"name": "views/", "entry_data": "Directory"},
                {"name": "models.py", "entry_data": {"File": {"lang": "Python"}}},
            ],
        },
    }


@pytest.fixture
def token_info_entries():
    return [
        {
            "file": "src/a.rs",
            "data": [
                {
                    "kind": "reference",
                    "snippet": {"data": "    let x = foo();", "highlights": [{"start": 12, "end": 15}]},
                },
                {
                    "kind": "definition",
                    "snippet": {"data": "fn foo() {}", "highlights": [{"start": 3, "end": 6}]},
                },
            ],
        },
        {
            "file": "src/b.rs",
            "data": [
                {
                    "kind": "reference",
                    "snippet": {"data": "\tfoo()", "highlights": [{"start": 1, "end": 4}]},
                }
            ],
        },
        {
            "file": "src/a.rs",
            "data": [
                {
                    "kind": "reference",
                    "snippet": {"data": "  foo();", "highlights": [{"start": 2, "end": 5}]},
                }
            ],
        },
    ]
