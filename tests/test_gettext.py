import io
import json
import sys

import pytest

from booktools.catalog import Catalog, PoMessage, write_po
from booktools.gettext import main, translate, translate_book


def create_catalog(translations, fuzzy=()):
    catalog = Catalog()
    for msgid, msgstr in translations:
        flags = ["fuzzy"] if msgid in fuzzy else []
        catalog.append_or_update(PoMessage(msgid, msgstr, flags=flags))
    return catalog


def chapter(name, content, path=None, sub_items=()):
    return {
        "Chapter": {
            "name": name,
            "content": content,
            "number": None,
            "sub_items": list(sub_items),
            "path": path,
            "source_path": path,
            "parent_names": [],
        }
    }


def test_translate_single_line():
    catalog = create_catalog([("foo bar", "FOO BAR")])
    assert translate("foo bar", catalog) == "FOO BAR"


def test_translate_single_paragraph():
    catalog = create_catalog([("foo bar", "FOO BAR")])
    assert translate("foo bar\n", catalog) == "FOO BAR\n"


def test_translate_paragraph_with_leading_newlines():
    catalog = create_catalog([("foo bar", "FOO BAR")])
    assert translate("\n\n\nfoo bar\n", catalog) == "\n\n\nFOO BAR\n"


def test_translate_paragraph_with_trailing_newlines():
    catalog = create_catalog([("foo bar", "FOO BAR")])
    assert translate("foo bar\n\n\n", catalog) == "FOO BAR\n\n\n"


def test_translate_multiple_paragraphs():
    catalog = create_catalog([("foo bar", "FOO BAR")])
    assert (
        translate("first paragraph\n\nfoo bar\n\nlast paragraph\n", catalog)
        == "first paragraph\n\nFOO BAR\n\nlast paragraph\n"
    )


def test_translate_multiple_paragraphs_extra_newlines():
    catalog = create_catalog(
        [
            ("first\nparagraph", "FIRST\nTRANSLATED\nPARAGRAPH"),
            ("last\nparagraph", "LAST\nTRANSLATED\nPARAGRAPH"),
        ]
    )
    assert (
        translate("\nfirst\nparagraph\n\n\n\nlast\nparagraph\n\n\n", catalog)
        == "\nFIRST\nTRANSLATED\nPARAGRAPH\n\n\n\nLAST\nTRANSLATED\nPARAGRAPH\n\n\n"
    )


def test_translate_skips_fuzzy_and_empty():
    catalog = create_catalog([("foo bar", "FOO BAR"), ("baz", "")], fuzzy={"foo bar"})
    assert translate("foo bar\n\nbaz\n", catalog) == "foo bar\n\nbaz\n"


def _context(root, language="xx", gettext_cfg=None):
    config = {"book": {"language": language}}
    if gettext_cfg is not None:
        config["preprocessor"] = {"gettext": gettext_cfg}
    return {"root": str(root), "config": config, "mdbook_version": "0.4.28"}


def _book():
    return {
        "sections": [
            {"PartTitle": "foo bar"},
            "Separator",
            chapter("foo bar", "foo bar\n", "a.md", [chapter("baz", "baz\n", "b.md")]),
        ]
    }


def test_translate_book(tmp_path):
    (tmp_path / "po").mkdir()
    write_po(create_catalog([("foo bar", "FOO BAR"), ("baz", "BAZ")]), tmp_path / "po" / "xx.po")
    book = translate_book(_context(tmp_path, gettext_cfg={}), _book())
    sections = book["sections"]
    assert sections[0] == {"PartTitle": "FOO BAR"}
    assert sections[1] == "Separator"
    top = sections[2]["Chapter"]
    assert (top["name"], top["content"]) == ("FOO BAR", "FOO BAR\n")
    sub = top["sub_items"][0]["Chapter"]
    assert (sub["name"], sub["content"]) == ("BAZ", "BAZ\n")


def test_translate_book_custom_po_dir(tmp_path):
    (tmp_path / "translations").mkdir()
    write_po(create_catalog([("baz", "BAZ")]), tmp_path / "translations" / "xx.po")
    context = _context(tmp_path, gettext_cfg={"po-dir": "translations"})
    book = translate_book(context, _book())
    assert book["sections"][2]["Chapter"]["sub_items"][0]["Chapter"]["name"] == "BAZ"


def test_translate_book_without_language_is_unchanged(tmp_path):
    context = {"root": str(tmp_path), "config": {"book": {}}}
    assert translate_book(context, _book()) == _book()


def test_translate_book_missing_po_file_is_unchanged(tmp_path):
    assert translate_book(_context(tmp_path, gettext_cfg={}), _book()) == _book()


def test_translate_book_missing_config(tmp_path):
    with pytest.raises(ValueError, match="preprocessor.gettext"):
        translate_book(_context(tmp_path), _book())


def test_translate_book_bad_po_file(tmp_path):
    (tmp_path / "po").mkdir()
    (tmp_path / "po" / "xx.po").write_text("garbage\n", encoding="utf-8")
    with pytest.raises(ValueError, match="as PO file"):
        translate_book(_context(tmp_path, gettext_cfg={}), _book())


@pytest.mark.parametrize("renderer, code", [("xgettext", 1), ("html", 0)])
def test_main_supports(renderer, code):
    assert main(["supports", renderer]) == code


def test_main_preprocesses_stdin(tmp_path, monkeypatch, capsys):
    (tmp_path / "po").mkdir()
    write_po(create_catalog([("foo bar", "FOO BAR")]), tmp_path / "po" / "xx.po")
    payload = [_context(tmp_path, gettext_cfg={}), _book()]
    monkeypatch.setattr(sys, "stdin", io.StringIO(json.dumps(payload)))
    assert main([]) == 0
    captured = capsys.readouterr()
    assert json.loads(captured.out)["sections"][0] == {"PartTitle": "FOO BAR"}
    assert "Warning" not in captured.err


def test_main_warns_on_other_version(tmp_path, monkeypatch, capsys):
    context = _context(tmp_path, gettext_cfg={})
    context["mdbook_version"] = "0.3.0"
    monkeypatch.setattr(sys, "stdin", io.StringIO(json.dumps([context, _book()])))
    assert main([]) == 0
    assert "Warning" in capsys.readouterr().err


def test_main_rejects_bad_input(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("not json"))
    assert main([]) == 1
    assert "Error" in capsys.readouterr().err