"""Unit tests for sta_shell.bundle — triplet codec and bundle evaluation."""
from __future__ import annotations

from pathlib import Path

import pytest

import sta_shell.bundle
from sta_shell.bundle import (
    TCL_INITS,
    decode_bundle,
    decode_fragment,
    encode_fragment,
    encode_script,
    evaluate_bundle,
)
from sta_shell.core.errors import BundleFormatError

TCL_SOURCE = Path(sta_shell.bundle.__file__).parent / "tcl" / "sta.tcl"


# ---------------------------------------------------------------------------
# decode_fragment
# ---------------------------------------------------------------------------


class TestDecodeFragment:
    def test_decodes_triplets(self) -> None:
        assert decode_fragment("112117116") == b"put"

    def test_empty_fragment(self) -> None:
        assert decode_fragment("") == b""

    def test_full_byte_range(self) -> None:
        assert decode_fragment("000127255") == bytes([0, 127, 255])

    @pytest.mark.parametrize("fragment", ["1", "1121", "11211"])
    def test_length_not_multiple_of_three(self, fragment: str) -> None:
        with pytest.raises(BundleFormatError, match="multiple of 3"):
            decode_fragment(fragment)

    @pytest.mark.parametrize("fragment", ["12a", " 65", "-01", "١٢٣"])
    def test_non_digit_code(self, fragment: str) -> None:
        with pytest.raises(BundleFormatError, match="invalid byte code"):
            decode_fragment(fragment)

    def test_value_above_255(self) -> None:
        with pytest.raises(BundleFormatError, match="out of range"):
            decode_fragment("256")

    def test_error_names_fragment_index(self) -> None:
        with pytest.raises(BundleFormatError) as info:
            decode_fragment("99", index=4)
        assert info.value.fragment_index == 4
        assert "fragment 4" in str(info.value)

    @pytest.mark.parametrize("fragment", ["", "032", "112117116115", "000255010013"])
    def test_reencoding_reproduces_fragment(self, fragment: str) -> None:
        assert encode_fragment(decode_fragment(fragment)) == fragment


# ---------------------------------------------------------------------------
# decode_bundle / encode_script
# ---------------------------------------------------------------------------


class TestDecodeBundle:
    def test_concatenates_fragments_in_order(self) -> None:
        assert decode_bundle(["112", "117116", ""]) == "put"

    def test_stops_at_sentinel(self) -> None:
        assert decode_bundle(["112", "", "999"]) == "p"

    def test_without_sentinel_uses_all_fragments(self) -> None:
        assert decode_bundle(["112", "117"]) == "pu"

    def test_multibyte_character_split_across_fragments(self) -> None:
        fragments = encode_script("été", fragment_width=3)
        assert decode_bundle(fragments) == "été"

    def test_invalid_utf8(self) -> None:
        with pytest.raises(BundleFormatError, match="UTF-8"):
            decode_bundle(["255", ""])

    def test_bad_fragment_reports_index(self) -> None:
        with pytest.raises(BundleFormatError, match="fragment 1"):
            decode_bundle(["112", "11", ""])


class TestEncodeScript:
    def test_ends_with_sentinel(self) -> None:
        assert encode_script("puts hi")[-1] == ""

    def test_fragment_width_rounded_down_to_triplets(self) -> None:
        fragments = encode_script("abcdef", fragment_width=7)
        assert fragments[:-1] == ("097098", "099100", "101102")

    def test_empty_script(self) -> None:
        assert encode_script("") == ("",)

    def test_decode_inverts_encode(self) -> None:
        source = 'proc hello {} {\n  puts "hello"\n}\n'
        assert decode_bundle(encode_script(source)) == source


# ---------------------------------------------------------------------------
# The shipped bundle
# ---------------------------------------------------------------------------


class TestShippedBundle:
    def test_every_fragment_is_triplet_aligned(self) -> None:
        assert all(len(fragment) % 3 == 0 for fragment in TCL_INITS)

    def test_terminated_by_sentinel(self) -> None:
        assert TCL_INITS[-1] == ""
        assert all(TCL_INITS[:-1])

    def test_matches_tcl_source(self) -> None:
        source = TCL_SOURCE.read_text(encoding="utf-8")
        assert decode_bundle(TCL_INITS) == source
        assert encode_script(source) == TCL_INITS

    def test_defines_sta_namespace_commands(self) -> None:
        script = decode_bundle(TCL_INITS)
        for proc in ("show_splash", "define_sta_cmds", "define_cmd_args", "help"):
            assert f"proc {proc} " in script


# ---------------------------------------------------------------------------
# evaluate_bundle
# ---------------------------------------------------------------------------


class TestEvaluateBundle:
    def test_evaluates_decoded_script_once(self, interpreter) -> None:
        result = evaluate_bundle(interpreter, ["112117116115", ""])
        assert result.ok
        assert not result.fatal
        assert interpreter.evaluated == ["puts"]

    def test_evaluation_failure_is_fatal_with_backtrace(self, make_interpreter) -> None:
        interpreter = make_interpreter(failing={"puts"})
        result = evaluate_bundle(interpreter, ["112117116115", ""])
        assert result.fatal
        assert "while executing" in result.detail

    def test_format_error_is_fatal_without_evaluating(self, interpreter) -> None:
        result = evaluate_bundle(interpreter, ["1121", ""])
        assert result.fatal
        assert "multiple of 3" in result.detail
        assert interpreter.evaluated == []
