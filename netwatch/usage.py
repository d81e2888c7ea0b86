"""Version and usage messages."""

import sys
from typing import TextIO

PROG_NAME = "netwatch"
PROG_VERSION = "0.1.0"
PROG_NAME_LOG = "netwatch.log"

_OPTION_WIDTH = 24
_KEY_WIDTH = 14

_OPTIONS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("-B, --bytes", ("view in bytes, default in bits",)),
    ("-c", ("visualization each active connection of the process",)),
    ("--color 1|2|3", ("color scheme, 1 is default",)),
    (
        '-f, --file "filename"',
        (
            "save statistics in file, filename is optional,",
            f"default is '{PROG_NAME_LOG}'",
        ),
    ),
    ("-h, --help", ("show this message",)),
    (
        "-i, --interface iface",
        (
            "specifies an interface, default is all",
            "(except interface with network 127.0.0.0/8)",
        ),
    ),
    (
        "-n",
        (
            "numeric host and service, implicit '-c', try '-nh' to no",
            "translate only host or '-np' to not translate only service",
        ),
    ),
    ("-p, --protocol tcp|udp", ("specifies a protocol, the default is tcp and udp",)),
    (
        "--si",
        (
            "show SI format, with powers of 10, default is IEC,",
            "with powers of 2",
        ),
    ),
    ("-v, --verbose", ("verbose mode, also show process without traffic",)),
    ("-V, --version", ("show version",)),
)

_KEYS: tuple[tuple[str, str], ...] = (
    ("arrow keys", "scroll"),
    ("s", "change column-based sort"),
    ("q", "exit"),
)


def _option_lines():
    for option, description in _OPTIONS:
        first, *rest = description
        yield f" {option:<{_OPTION_WIDTH}}{first}"
        for more in rest:
            yield " " * (_OPTION_WIDTH + 1) + more


def version_text() -> str:
    """Program name and version, as one line without newline."""
    return f"{PROG_NAME} - {PROG_VERSION}"


def usage_text() -> str:
    """The option summary shown by --help."""
    lines = [f"Usage: {PROG_NAME} [options]", "", "Options:"]
    lines.extend(_option_lines())
    lines.extend(["", "when running press:"])
    lines.extend(f" {key:<{_KEY_WIDTH}}{action}" for key, action in _KEYS)
    return "\n".join(lines) + "\n"


def show_version(stream: TextIO | None = None) -> None:
    """Write the version line, to standard output by default."""
    out = stream if stream is not None else sys.stdout
    out.write(version_text() + "\n")


def usage(stream: TextIO | None = None) -> None:
    """Write the version line and the usage text.

    Without a stream the version goes to standard output and the usage
    text to standard error.
    """
    show_version(stream)
    out = stream if stream is not None else sys.stderr
    out.write(usage_text())