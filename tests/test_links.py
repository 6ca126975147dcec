from unittest import mock

import pytest
import requests

from booktools.links import LinkCheckError, check_links, extract_links, main


class FakeResponse:
    def __init__(self, url, status_code=200, text=""):
        self.url = url
        self.status_code = status_code
        self.text = text


SITE = {
    "https://example.com/": FakeResponse(
        "https://example.com/",
        text=(
            '<a href="/about">About</a>'
            '<a href="https://example.org/ok">ok</a>'
            '<a href="https://example.org/missing">missing</a>'
        ),
    ),
    "https://example.com/about": FakeResponse(
        "https://example.com/about", text="<p>No links here.</p>"
    ),
    "https://example.org/ok": FakeResponse("https://example.org/ok"),
    "https://example.org/missing": FakeResponse(
        "https://example.org/missing", status_code=404
    ),
}


def _fake_get(url):
    return SITE[url]


def test_extract_links_resolves_relative_hrefs():
    document = (
        '<a href="x">relative</a><a>no href</a>'
        '<a href="https://example.org/">absolute</a>'
    )
    assert extract_links("https://example.com/dir/page", document) == [
        "https://example.com/dir/x",
        "https://example.org/",
    ]


def test_extract_links_skips_unparsable(capsys):
    links = extract_links(
        "https://example.com/", '<a href="http://[::1">bad</a><a href="/ok">ok</a>'
    )
    assert links == ["https://example.com/ok"]
    assert "(ignored)" in capsys.readouterr().out


def test_check_links_reports_failed_external_links():
    with mock.patch("booktools.links.requests.get", side_effect=_fake_get) as get:
        failed = check_links("https://example.com/")
    assert failed == ["https://example.org/missing"]
    fetched = [call.args[0] for call in get.call_args_list]
    assert "https://example.com/about" in fetched


def test_check_links_failed_start_page():
    response = FakeResponse("https://example.com/", status_code=500)
    with mock.patch("booktools.links.requests.get", return_value=response):
        assert check_links("https://example.com/") == ["https://example.com/"]


def test_check_links_request_error():
    error = requests.ConnectionError("refused")
    with mock.patch("booktools.links.requests.get", side_effect=error):
        with pytest.raises(LinkCheckError, match="request error"):
            check_links("https://example.com/")


def test_main_prints_failed_links(capsys):
    with mock.patch("booktools.links.requests.get", side_effect=_fake_get):
        assert main(["https://example.com/"]) == 0
    out = capsys.readouterr().out
    assert "Links: ['https://example.org/missing']" in out


def test_main_reports_errors(capsys):
    error = requests.ConnectionError("refused")
    with mock.patch("booktools.links.requests.get", side_effect=error):
        assert main(["https://example.com/"]) == 1
    assert "Could not extract links" in capsys.readouterr().out