"""A link checker that crawls a site and reports broken links."""

from __future__ import annotations

import ipaddress
import sys
from urllib.parse import urljoin, urlsplit

import requests
from bs4 import BeautifulSoup


class LinkCheckError(Exception):
    """Raised when a page cannot be fetched."""


def _domain(url: str) -> str | None:
    """The host of ``url`` when it is a domain name, else None."""
    host = urlsplit(url).hostname
    if host is None:
        return None
    try:
        ipaddress.ip_address(host)
    except ValueError:
        return host
    return None


def _get(url: str) -> requests.Response:
    try:
        return requests.get(url)
    except requests.RequestException as err:
        raise LinkCheckError(f"request error: {err}") from err


def _is_success(response) -> bool:
    return 200 <= response.status_code < 300


def extract_links(base_url: str, document: str) -> list[str]:
    """Return the targets of all ``<a href>`` elements, resolved against ``base_url``.

    Links that cannot be resolved are reported and skipped.
    """
    valid_urls = []
    for element in BeautifulSoup(document, "html.parser").find_all("a"):
        href = element.get("href")
        if href is None:
            continue
        try:
            valid_urls.append(urljoin(base_url, href))
        except ValueError as err:
            print(f"On {base_url}: could not parse {href!r}: {err} (ignored)")
    return valid_urls


def check_links(url: str) -> list[str]:
    """Crawl pages in the domain of ``url`` and return the links that failed.

    Links to other domains are fetched once; links in the same domain are
    followed recursively.
    """
    print(f"Checking {url}")
    response = _get(url)
    if not _is_success(response):
        return [url]

    links = extract_links(response.url, response.text)
    for link in links:
        print(f"{link}, {_domain(link)!r}")

    failed_links = []
    for link in links:
        if _domain(link) != _domain(url):
            print(f"Checking external link: {link}")
            linked = _get(link)
            if not _is_success(linked):
                print(f"Error on {url}: {link} failed: {linked.status_code}")
                failed_links.append(link)
        else:
            print(f"Checking link in same domain: {link}")
            failed_links.extend(check_links(link))
    return failed_links


def main(argv=None) -> int:
    """Check the links reachable from a start URL (the first argument)."""
    args = sys.argv[1:] if argv is None else list(argv)
    start_url = args[0] if args else "https://www.example.com/"
    try:
        links = check_links(start_url)
    except LinkCheckError as err:
        print(f"Could not extract links: {err}")
        return 1
    print(f"Links: {links!r}")
    return 0


if __name__ == "__main__":
    sys.exit(main())