"""Fetching URLs, one after another or all at once."""

import sys
import time
from collections.abc import Iterable, Iterator
from concurrent.futures import ThreadPoolExecutor, as_completed

import requests

_CHUNK = 32768


def fetch(url: str) -> bytes:
    """Return the body found at ``url``, whatever the response status.

    Raises ``requests.RequestException`` if the request or the read fails.
    """
    with requests.get(url, stream=True) as resp:
        try:
            return resp.content
        except requests.RequestException as err:
            raise requests.RequestException(f"reading {url}: {err}") from err


def _report(url: str) -> str:
    start = time.monotonic()
    try:
        resp = requests.get(url, stream=True)
    except requests.RequestException as err:
        return str(err)
    try:
        with resp:
            nbytes = sum(len(chunk) for chunk in resp.iter_content(_CHUNK))
    except requests.RequestException as err:
        return f"while reading {url}: {err}"
    secs = time.monotonic() - start
    return f"{secs:.2f}s  {nbytes:7d}  {url}"


def fetch_all(urls: Iterable[str]) -> Iterator[str]:
    """Fetch the URLs in parallel and yield one report line for each as it finishes.

    A line gives the time taken, the size of the body and the URL, or the
    error that stopped the fetch.
    """
    urls = list(urls)
    if not urls:
        return
    with ThreadPoolExecutor(max_workers=len(urls)) as pool:
        futures = [pool.submit(_report, url) for url in urls]
        for future in as_completed(futures):
            yield future.result()


def main(argv: list[str] | None = None) -> int:
    """Print the content found at each URL; stop at the first failure."""
    for url in sys.argv[1:] if argv is None else argv:
        try:
            body = fetch(url)
        except requests.RequestException as err:
            print(f"fetch: {err}", file=sys.stderr)
            return 1
        sys.stdout.buffer.write(body)
        sys.stdout.buffer.flush()
    return 0


def main_all(argv: list[str] | None = None) -> int:
    """Fetch the URLs in parallel, reporting times and sizes."""
    start = time.monotonic()
    for line in fetch_all(sys.argv[1:] if argv is None else argv):
        print(line)
    print(f"{time.monotonic() - start:.2f}s elapsed")
    return 0


if __name__ == "__main__":
    sys.exit(main())