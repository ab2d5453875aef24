"""Command line entry point: fetch URLs and report their word counts."""

from __future__ import annotations

import os
import sys
import threading
from dataclasses import dataclass
from typing import Optional, Sequence

from sitewordcount.http_client import HTTPClient
from sitewordcount.thread_pool import ThreadPool
from sitewordcount.url import is_valid_url
from sitewordcount.word_counter import count_words, extract_text_from_html

FETCH_ERROR = "Failed to fetch content or HTTP error."

_output_lock = threading.Lock()


def _locked_write(message: str) -> None:
    with _output_lock:
        sys.stdout.write(message)
        sys.stdout.flush()


@dataclass
class FetchResult:
    """Outcome of fetching and counting one URL."""

    url: str
    content: Optional[bytes] = None
    word_count: int = 0
    success: bool = False
    error_message: str = ""


def process_content(url: str, content: bytes) -> FetchResult:
    """Count the words of a fetched page, reporting progress on stdout."""
    result = FetchResult(url)
    if not content:
        result.error_message = FETCH_ERROR
        _locked_write(f"Error fetching {url}: {result.error_message}\n")
        return result
    result.content = content
    html = content.decode("utf-8", errors="replace")
    result.word_count = count_words(extract_text_from_html(html))
    result.success = True
    _locked_write(
        f"Success! URL: {url} Content length: {len(content)} bytes, "
        f"Word count: {result.word_count} words\n"
    )
    return result


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Fetch the URLs in *argv*, print per-URL progress and a summary."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("Usage: sitewordcount <url1> <url2> ...", file=sys.stderr)
        return 1

    urls = []
    for arg in args:
        if not is_valid_url(arg):
            print(f"Warning: Invalid URL '{arg}' ignored.", file=sys.stderr)
            continue
        urls.append(arg)

    num_threads = os.cpu_count() or 1
    results: list[FetchResult] = []
    results_lock = threading.Lock()

    def record(url: str, content: bytes) -> None:
        result = process_content(url, content)
        with results_lock:
            results.append(result)

    with ThreadPool(num_threads) as pool:
        client = HTTPClient()
        for url in urls:
            client.add_request(url, lambda req_url, content: pool.enqueue(record, req_url, content))
        _locked_write(f"Fetching {len(urls)} URLs using up to {num_threads} threads...\n")
        client.run()

    lines = ["\nSummary:\n"]
    for result in results:
        lines.append(f"URL: {result.url}\n")
        if result.success:
            lines.append(f"  Word count: {result.word_count}\n")
        else:
            lines.append(f"  Error: {result.error_message}\n")
        lines.append("\n")
    _locked_write("".join(lines))
    return 0


if __name__ == "__main__":
    sys.exit(main())