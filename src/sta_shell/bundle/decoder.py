"""Triplet decoding of the embedded init-script bundle.

The bundle is produced at build time from the Tcl sources in ``tcl/``.
Every byte of the script is written as a zero-padded three-digit decimal
code, and the resulting string is split into fragments whose lengths are
multiples of three. An empty fragment terminates the sequence::

    "112117116"  ->  b"put"

The bundle is part of the program, not user input. A bundle that fails to
decode or evaluate is reported as a ``BundleResult`` with ``ok`` False; the
caller decides how to stop the process.
"""
from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Final

from sta_shell.core.errors import BundleFormatError
from sta_shell.interp.base import Interpreter

logger = logging.getLogger(__name__)

TRIPLET_WIDTH: Final[int] = 3
DEFAULT_FRAGMENT_WIDTH: Final[int] = 72


def decode_fragment(fragment: str, index: int | None = None) -> bytes:
    """Decode one fragment of three-digit byte codes.

    Raises
    ------
    BundleFormatError
        If the fragment length is not a multiple of three, a slice is not
        three decimal digits, or a value exceeds 255.
    """
    if len(fragment) % TRIPLET_WIDTH != 0:
        raise BundleFormatError(
            f"length {len(fragment)} is not a multiple of {TRIPLET_WIDTH}", index
        )
    decoded = bytearray()
    for start in range(0, len(fragment), TRIPLET_WIDTH):
        code = fragment[start : start + TRIPLET_WIDTH]
        if not (code.isascii() and code.isdigit()):
            raise BundleFormatError(f"invalid byte code {code!r} at offset {start}", index)
        value = int(code)
        if value > 255:
            raise BundleFormatError(f"byte code {value} out of range at offset {start}", index)
        decoded.append(value)
    return bytes(decoded)


def decode_bundle(fragments: Iterable[str]) -> str:
    """Decode fragments up to the empty sentinel into script source."""
    buffer = bytearray()
    for index, fragment in enumerate(fragments):
        if not fragment:
            break
        buffer += decode_fragment(fragment, index)
    try:
        return buffer.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise BundleFormatError(f"decoded script is not valid UTF-8: {exc}") from exc


def encode_fragment(data: bytes) -> str:
    return "".join(f"{byte:03d}" for byte in data)


def encode_script(source: str, fragment_width: int = DEFAULT_FRAGMENT_WIDTH) -> tuple[str, ...]:
    """Encode script source into fragments, including the empty sentinel.

    Parameters
    ----------
    source:
        The script text to encode.
    fragment_width:
        Maximum fragment length in characters; rounded down to a multiple
        of three.
    """
    width = max(TRIPLET_WIDTH, fragment_width - fragment_width % TRIPLET_WIDTH)
    encoded = encode_fragment(source.encode("utf-8"))
    fragments = [encoded[start : start + width] for start in range(0, len(encoded), width)]
    fragments.append("")
    return tuple(fragments)


@dataclass(frozen=True)
class BundleResult:
    """Outcome of decoding and evaluating the bundle.

    Parameters
    ----------
    ok:
        True if the bundle decoded and evaluated cleanly.
    detail:
        The interpreter backtrace or decoding error for a failed bundle.
    """

    ok: bool
    detail: str = ""

    @property
    def fatal(self) -> bool:
        return not self.ok


def evaluate_bundle(interpreter: Interpreter, fragments: Iterable[str]) -> BundleResult:
    """Decode ``fragments`` and evaluate the script once as a single unit."""
    try:
        script = decode_bundle(fragments)
    except BundleFormatError as exc:
        logger.debug("Bundle decoding failed: %s", exc)
        return BundleResult(ok=False, detail=str(exc))

    logger.debug("Evaluating embedded bundle (%d characters)", len(script))
    result = interpreter.eval(script)
    if result.ok:
        return BundleResult(ok=True)
    return BundleResult(ok=False, detail=interpreter.error_info() or result.text)
