"""Shared fixtures: a small interview-notes corpus on disk."""

from __future__ import annotations

from pathlib import Path

import pytest

JS_TOPICS = [
    ("Variables & Data Types", "01_variable&Datatypes.md"),
    ("Operators", "02_operators.md"),
    ("Functions", "03_functions.md"),
    ("Scope & Hoisting", "04_scope&hoisting.md"),
    ("Closures", "05_closures.md"),
    ("this Keyword", "06_this.md"),
    ("Objects", "07_objects.md"),
    ("Prototypes", "08_prototypes.md"),
    ("Classes", "09_classes.md"),
    ("Arrays", "10_arrays.md"),
    ("Strings", "11_strings.md"),
    ("DOM", "12_dom.md"),
    ("Events", "13_events.md"),
    ("Promises", "14_promises.md"),
    ("Async/Await", "15_async_await.md"),
    ("Event Loop", "16_event_loop.md"),
    ("Modules", "17_modules.md"),
    ("Error Handling", "18_error_handling.md"),
]
REACT_TOPICS = [
    ("React Basics", "react/01_basics.md"),
    ("React Hooks", "react/02_hooks.md"),
]


def build_index(js_topics=JS_TOPICS, react_topics=REACT_TOPICS) -> str:
    lines = ["---", "layout: default", "title: Interview Notes", "---", "", "# Interview Notes", ""]
    lines += ["## JavaScript", ""]
    lines += [f"{n}. [{label}](./{path})" for n, (label, path) in enumerate(js_topics, start=1)]
    lines += ["", "## React", ""]
    lines += [f"- [{label}]({path})" for label, path in react_topics]
    lines += ["", "Found a mistake? [Open an issue](https://example.com/issues).", ""]
    return "\n".join(lines)


def write_corpus(root: Path, topics, index_text: str | None = None) -> Path:
    root.mkdir(parents=True, exist_ok=True)
    for label, rel in topics:
        target = root / rel
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(
            f"---\nlayout: default\n---\n\n# {label}\n\n**Q: What is {label}?**\n\n"
            "```js\nconst answer = 42;\n```\n",
            encoding="utf-8",
        )
    (root / "index.md").write_text(index_text or build_index(), encoding="utf-8")
    return root


@pytest.fixture
def corpus(tmp_path: Path) -> Path:
    """Corpus with 18 JavaScript and 2 React documents plus index.md."""
    return write_corpus(tmp_path / "notes", JS_TOPICS + REACT_TOPICS)
