"""A crawler that reports broken links reachable from a start page."""

from __future__ import annotations

import ipaddress
import sys
from urllib.parse import urljoin, urlsplit

import requests
from bs4 import BeautifulSoup

_TIMEOUT = 30


class LinkCheckError(Exception):
    """A request made while checking links failed."""

    def __init__(self, cause: Exception) -> None:
        super().__init__(f"request error: {cause}")
        self.cause = cause


def _get(url: str) -> requests.Response:
    try:
        return requests.get(url, timeout=_TIMEOUT)
    except requests.RequestException as exc:
        raise LinkCheckError(exc) from exc


def _is_success(response: requests.Response) -> bool:
    return 200 <= response.status_code < 300


def _domain(url: str) -> str | None:
    """Host name of ``url``, or None when it has none or is an IP address."""
    host = urlsplit(url).hostname
    if host is None:
        return None
    try:
        ipaddress.ip_address(host)
    except ValueError:
        return host
    return None


def extract_links(response: requests.Response) -> list[str]:
    """Return the absolute targets of every ``<a href>`` in the response page."""
    base_url = response.url
    html = BeautifulSoup(response.text, "html.parser")

    valid_urls = []
    for element in html.find_all("a"):
        href = element.get("href")
        if href is None:
            continue
        try:
            valid_urls.append(urljoin(base_url, href))
        except ValueError as err:
            print(f"On {base_url}: could not parse {href!r}: {err} (ignored)")
    return valid_urls


def check_links(url: str) -> list[str]:
    """Crawl ``url`` and its same-domain pages; return the links that failed."""
    print(f"Checking {url}")

    response = _get(url)
    if not _is_success(response):
        return [url]

    links = extract_links(response)
    for link in links:
        print(f"{link}, {_domain(link)!r}")

    failed_links = []
    for link in links:
        if _domain(link) != _domain(url):
            print(f"Checking external link: {link}")
            response = _get(link)
            if not _is_success(response):
                print(f"Error on {url}: {link} failed: {response.status_code}")
                failed_links.append(link)
        else:
            print(f"Checking link in same domain: {link}")
            failed_links.extend(check_links(link))
    return failed_links


def main(argv: list[str] | None = None) -> int:
    """Check the links reachable from the given start page."""
    args = sys.argv[1:] if argv is None else argv
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