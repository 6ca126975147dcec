import io
import json
import sys
from pathlib import Path

import pytest

from booktools.catalog import Catalog, load_po
from booktools.xgettext import add_message, create_catalog, main

SUMMARY = "# Summary\n\n- [Intro](intro.md)\n- [Usage](usage.md)\n"


def chapter(name, content, path):
    return {
        "Chapter": {
            "name": name,
            "content": content,
            "number": None,
            "sub_items": [],
            "path": path,
            "source_path": path,
            "parent_names": [],
        }
    }


def make_context(root, summary=SUMMARY, **extra):
    (root / "src").mkdir(exist_ok=True)
    (root / "src" / "SUMMARY.md").write_text(summary, encoding="utf-8")
    context = {
        "root": str(root),
        "config": {"book": {"title": "My Book", "language": "en", "src": "src"}},
        "book": {
            "sections": [
                chapter("Intro", "Hello world.\n\nSecond paragraph.\n", "intro.md"),
                "Separator",
                chapter("Usage", "Hello world.\n", "usage.md"),
            ]
        },
    }
    context.update(extra)
    return context


def test_add_message_new_and_repeated():
    catalog = Catalog()
    add_message(catalog, "hi", "a.md:1")
    add_message(catalog, "hi", "b.md:2")
    message = catalog.find_message("hi")
    assert message.source == "a.md:1\nb.md:2"
    assert message.msgstr == ""
    assert len(catalog) == 1


def test_create_catalog_metadata(tmp_path):
    metadata = create_catalog(make_context(tmp_path)).metadata
    assert metadata.project_id_version == "My Book"
    assert metadata.language == "en"
    assert metadata.mime_version == "1.0"
    assert metadata.content_type == "text/plain; charset=UTF-8"
    assert metadata.content_transfer_encoding == "8bit"


def test_create_catalog_summary_sources(tmp_path):
    catalog = create_catalog(make_context(tmp_path))
    summary_path = Path("src") / "SUMMARY.md"
    assert catalog.find_message("Intro").source == f"{summary_path}:3"
    assert catalog.find_message("Usage").source == f"{summary_path}:4"


def test_create_catalog_chapter_messages(tmp_path):
    catalog = create_catalog(make_context(tmp_path))
    intro = Path("src") / "intro.md"
    usage = Path("src") / "usage.md"
    sources = catalog.find_message("Hello world.").source.split("\n")
    assert sources == [f"{intro}:1", f"{usage}:1"]
    assert catalog.find_message("Second paragraph.").source.startswith(f"{intro}:")
    assert [m.msgid for m in catalog] == ["Intro", "Usage", "Hello world.", "Second paragraph."]


def test_create_catalog_title_missing_from_summary(tmp_path):
    context = make_context(tmp_path, summary="# Summary\n\n- [Intro](intro.md)\n")
    with pytest.raises(ValueError, match="Could not find 'Usage'"):
        create_catalog(context)


def test_main_writes_pot_file(tmp_path, monkeypatch):
    destination = tmp_path / "book" / "xgettext"
    context = make_context(
        tmp_path,
        destination=str(destination),
    )
    context["config"]["output"] = {"xgettext": {"pot-file": "messages.pot"}}
    monkeypatch.setattr(sys, "stdin", io.StringIO(json.dumps(context)))
    assert main([]) == 0
    written = load_po(destination / "messages.pot")
    assert written.find_message("Hello world.") is not None
    assert written.metadata.project_id_version == "My Book"


@pytest.mark.parametrize(
    "output, message",
    [
        ({}, "output.xgettext configuration"),
        ({"xgettext": {}}, "pot-file config value"),
        ({"xgettext": {"pot-file": 3}}, "Expected a string"),
    ],
)
def test_main_config_errors(tmp_path, monkeypatch, capsys, output, message):
    context = make_context(tmp_path, destination=str(tmp_path / "out"))
    context["config"]["output"] = output
    monkeypatch.setattr(sys, "stdin", io.StringIO(json.dumps(context)))
    assert main([]) == 1
    assert message in capsys.readouterr().err