"""The embedded init-script bundle and its triplet codec."""
from __future__ import annotations

from sta_shell.bundle.decoder import (
    BundleResult,
    decode_bundle,
    decode_fragment,
    encode_fragment,
    encode_script,
    evaluate_bundle,
)
from sta_shell.bundle.init_scripts import TCL_INITS

__all__ = [
    "BundleResult",
    "TCL_INITS",
    "decode_bundle",
    "decode_fragment",
    "encode_fragment",
    "encode_script",
    "evaluate_bundle",
]
