"""Tests for watsoncli.generator.param_mapper.

Covers:
- flag_kind_to_python: every flag kind maps to the type Typer parses
- sanitize_param_name: keywords, digits, hyphens
- build_help_text: remote defaults shown as hints
- map_flag_to_typer: option declarations, required sentinel, None defaults
"""

from __future__ import annotations

from typing import List, Optional

import pytest

from watsoncli.generator.param_mapper import (
    build_help_text,
    flag_kind_to_python,
    map_flag_to_typer,
    sanitize_param_name,
)
from watsoncli.models import FlagKind, FlagSpec


# ---------------------------------------------------------------------------
# flag_kind_to_python
# ---------------------------------------------------------------------------


class TestFlagKindToPython:
    @pytest.mark.parametrize(
        "kind,expected",
        [
            (FlagKind.STRING, str),
            (FlagKind.INT64, int),
            (FlagKind.FLOAT32, float),
            (FlagKind.FLOAT64, float),
            (FlagKind.BOOL, bool),
            (FlagKind.STRING_LIST, List[str]),
        ],
    )
    def test_native_types(self, kind: FlagKind, expected: object) -> None:
        assert flag_kind_to_python(kind) == expected

    @pytest.mark.parametrize(
        "kind",
        [
            FlagKind.JSON_OBJECT,
            FlagKind.FILE_PATH,
            FlagKind.FILE_WITH_METADATA_LIST,
            FlagKind.FILE_MAP,
            FlagKind.DATE,
            FlagKind.DATETIME,
        ],
    )
    def test_decoded_later_as_text(self, kind: FlagKind) -> None:
        assert flag_kind_to_python(kind) is str


# ---------------------------------------------------------------------------
# sanitize_param_name
# ---------------------------------------------------------------------------


class TestSanitizeParamName:
    def test_plain(self) -> None:
        assert sanitize_param_name("model_id") == "model_id"

    def test_hyphen(self) -> None:
        assert sanitize_param_name("language-translator-v3") == "language_translator_v3"

    def test_keyword(self) -> None:
        assert sanitize_param_name("from") == "from_"

    def test_leading_digit(self) -> None:
        assert sanitize_param_name("3d") == "_3d"

    def test_uppercase(self) -> None:
        assert sanitize_param_name("Accept") == "accept"

    def test_empty(self) -> None:
        assert sanitize_param_name("--") == "param"


# ---------------------------------------------------------------------------
# build_help_text
# ---------------------------------------------------------------------------


class TestBuildHelpText:
    def test_no_default(self) -> None:
        assert build_help_text(FlagSpec(name="text", help="Input text.")) == "Input text."

    def test_default_hint(self) -> None:
        flag = FlagSpec(name="voice", help="The voice.", default_value="en-US_MichaelVoice")
        assert build_help_text(flag) == "The voice.  [service default: en-US_MichaelVoice]"

    def test_bool_default_lowercase(self) -> None:
        flag = FlagSpec(name="export", kind=FlagKind.BOOL, default_value=False)
        assert build_help_text(flag) == "[service default: false]"


# ---------------------------------------------------------------------------
# map_flag_to_typer
# ---------------------------------------------------------------------------


class TestMapFlagToTyper:
    def test_optional_flag_defaults_to_none(self) -> None:
        desc = map_flag_to_typer(FlagSpec(name="model_id"))
        assert desc["name"] == "model_id"
        assert desc["flag_name"] == "model_id"
        assert desc["type"] == Optional[str]
        assert desc["default"].default is None
        assert desc["default"].param_decls == ("--model_id",)

    def test_required_flag_uses_sentinel(self) -> None:
        desc = map_flag_to_typer(FlagSpec(name="text", required=True))
        assert desc["default"].default is ...

    def test_remote_default_never_becomes_cli_default(self) -> None:
        desc = map_flag_to_typer(FlagSpec(name="voice", default_value="en-US_MichaelVoice"))
        assert desc["default"].default is None

    def test_short_form(self) -> None:
        desc = map_flag_to_typer(FlagSpec(name="version", short="v"))
        assert desc["default"].param_decls == ("--version", "-v")

    def test_bool_switch_pair(self) -> None:
        desc = map_flag_to_typer(FlagSpec(name="export", kind=FlagKind.BOOL))
        assert desc["default"].param_decls == ("--export/--no-export",)
        assert desc["type"] == Optional[bool]

    def test_keyword_name_sanitised(self) -> None:
        desc = map_flag_to_typer(FlagSpec(name="from"))
        assert desc["name"] == "from_"
        assert desc["flag_name"] == "from"
        assert desc["default"].param_decls == ("--from",)

    def test_metavar(self) -> None:
        desc = map_flag_to_typer(FlagSpec(name="metadata", kind=FlagKind.JSON_OBJECT))
        assert desc["default"].metavar == "JSON"
