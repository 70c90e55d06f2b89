"""Waiting for an HTTP server to start responding."""

import logging
import sys
import time

import requests

from .tempconv import _format_g

_log = logging.getLogger(__name__)


def _format_duration(seconds: float) -> str:
    if seconds == 0:
        return "0s"
    sign = "-" if seconds < 0 else ""
    seconds = abs(seconds)
    if seconds < 1:
        return f"{sign}{_format_g(seconds * 1000)}ms"
    minutes, secs = divmod(seconds, 60)
    hours, minutes = divmod(int(minutes), 60)
    text = f"{_format_g(round(secs, 9))}s"
    if hours:
        text = f"{hours}h{minutes}m{text}"
    elif minutes:
        text = f"{minutes}m{text}"
    return sign + text


def wait_for_server(url: str, timeout: float = 60.0) -> None:
    """Try to reach the server of ``url`` until ``timeout`` seconds have passed.

    Waits between attempts double each time. Raises ``TimeoutError`` if every
    attempt fails.
    """
    deadline = time.monotonic() + timeout
    tries = 0
    while time.monotonic() < deadline:
        try:
            requests.head(url)
            return
        except requests.RequestException as err:
            _log.warning("server not responding (%s); retrying...", err)
        time.sleep(2**tries)
        tries += 1
    raise TimeoutError(
        f"server {url} failed to respond after {_format_duration(timeout)}"
    )


def main(argv: list[str] | None = None) -> int:
    """Wait for the server of the one URL given to respond."""
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 1:
        print("usage: wait url", file=sys.stderr)
        return 1
    try:
        wait_for_server(args[0])
    except TimeoutError as err:
        print(f"Site is down: {err}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())