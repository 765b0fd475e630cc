import re
import subprocess

from . import constants


TIME_RE = re.compile(r"time=(\d+(?:\.\d+)?)")


class ProbeFailed(Exception):
    """A ping produced no usable latency, for whatever reason."""


def parse_ping_output(text):
    """Return the latency in ms from the first reply line of `ping` output."""
    for line in text.splitlines():
        if "from" not in line:
            continue
        match = TIME_RE.search(line)
        if match:
            return float(match.group(1))
    raise ProbeFailed("no reply line with a time= field")


def probe(host, ping_path=constants.PING_PATH):
    """Send a single echo request to `host` and return its round-trip time in ms.

    Blocks for as long as the ping command takes. Any failure (missing binary,
    non-zero exit, output without a reply) raises ProbeFailed.
    """
    try:
        output = subprocess.check_output(
            [ping_path, "-c1", host],
            text=True,
            errors="replace",
            stderr=subprocess.DEVNULL,
        )
    except (subprocess.CalledProcessError, OSError) as exc:
        raise ProbeFailed(f"ping {host} failed: {exc}") from exc
    return parse_ping_output(output)
