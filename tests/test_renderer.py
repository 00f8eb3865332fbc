"""Tests for watsoncli.renderer -- JSON, YAML, table and binary output."""

from __future__ import annotations

import dataclasses
import datetime
import enum
import json
from collections.abc import Iterator
from pathlib import Path

import pytest
import yaml
from pydantic import BaseModel

from watsoncli.exceptions import FileAccessError
from watsoncli.models import OutputChoice
from watsoncli.output import OutputFormat, OutputManager, set_output
from watsoncli.renderer import (
    OK,
    acknowledge,
    render,
    render_json,
    render_yaml,
    to_builtin,
    write_stream,
)
from watsoncli.table import NOTHING_TO_SHOW


@pytest.fixture(autouse=True)
def _plain_output() -> None:
    set_output(OutputManager(format=OutputFormat.PLAIN, no_color=True))


class Color(enum.Enum):
    RED = "red"


class Point(BaseModel):
    x: int
    y: int


@dataclasses.dataclass
class Event:
    name: str
    at: datetime.date


# ---------------------------------------------------------------------------
# Builtin conversion
# ---------------------------------------------------------------------------


class TestToBuiltin:
    def test_model(self) -> None:
        assert to_builtin(Point(x=1, y=2)) == {"x": 1, "y": 2}

    def test_dataclass_with_date(self) -> None:
        assert to_builtin(Event("launch", datetime.date(2019, 8, 1))) == {
            "name": "launch",
            "at": "2019-08-01",
        }

    def test_enum(self) -> None:
        assert to_builtin([Color.RED]) == ["red"]

    def test_builtins_unchanged(self) -> None:
        tree = {"a": [1, 2.5, None, True]}
        assert to_builtin(tree) == tree


# ---------------------------------------------------------------------------
# Formatters
# ---------------------------------------------------------------------------


class TestRenderJson:
    def test_two_space_indent(self) -> None:
        assert render_json({"a": 1}) == '{\n  "a": 1\n}'

    def test_non_ascii_kept(self) -> None:
        assert "Hola señor" in render_json({"t": "Hola señor"})


class TestRenderYaml:
    def test_key_order_kept(self) -> None:
        text = render_yaml({"zeta": 1, "alpha": 2})
        assert text.index("zeta") < text.index("alpha")

    def test_block_style(self) -> None:
        text = render_yaml({"items": [1, 2]})
        assert text == "items:\n- 1\n- 2\n"

    def test_round_trips(self) -> None:
        tree = {"models": [{"model_id": "en-es"}], "total": 1}
        assert yaml.safe_load(render_yaml(tree)) == tree


class TestRender:
    def test_json(self, capsys: pytest.CaptureFixture[str]) -> None:
        render({"translation": "Hola"}, OutputChoice.JSON, "value")
        assert json.loads(capsys.readouterr().out) == {"translation": "Hola"}

    def test_yaml(self, capsys: pytest.CaptureFixture[str]) -> None:
        render({"translation": "Hola"}, OutputChoice.YAML, "value")
        assert capsys.readouterr().out == "translation: Hola\n"

    def test_table_plain(self, capsys: pytest.CaptureFixture[str]) -> None:
        render([{"id": "a"}, {"id": "b"}], OutputChoice.TABLE, "value")
        assert capsys.readouterr().out == "Id\na\nb\n"

    def test_table_scalar_uses_fallback_header(self, capsys: pytest.CaptureFixture[str]) -> None:
        render("Hola", OutputChoice.TABLE, "translation")
        assert capsys.readouterr().out == "translation\nHola\n"

    def test_table_nothing_to_show(self, capsys: pytest.CaptureFixture[str]) -> None:
        render([], OutputChoice.TABLE, "value")
        assert capsys.readouterr().out == NOTHING_TO_SHOW + "\n"

    def test_json_null(self, capsys: pytest.CaptureFixture[str]) -> None:
        render(None, OutputChoice.JSON, "value")
        assert capsys.readouterr().out == "null\n"


def test_acknowledge(capsys: pytest.CaptureFixture[str]) -> None:
    acknowledge()
    assert capsys.readouterr().out == OK + "\n"


# ---------------------------------------------------------------------------
# Binary output
# ---------------------------------------------------------------------------


class TestWriteStream:
    def test_writes_all_chunks(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        target = tmp_path / "out.wav"
        written = write_stream(iter([b"RIFF", b"\x00\x01"]), str(target))
        assert written == 6
        assert target.read_bytes() == b"RIFF\x00\x01"
        assert capsys.readouterr().out == f"OK\nOutput written to {target}\n"

    def test_replaces_existing_file(self, tmp_path: Path) -> None:
        target = tmp_path / "out.bin"
        target.write_bytes(b"old content that is longer")
        write_stream(iter([b"new"]), str(target))
        assert target.read_bytes() == b"new"

    def test_empty_stream_creates_empty_file(self, tmp_path: Path) -> None:
        target = tmp_path / "empty.bin"
        assert write_stream(iter(()), str(target)) == 0
        assert target.read_bytes() == b""

    def test_unwritable_path(self, tmp_path: Path) -> None:
        target = tmp_path / "missing-dir" / "out.bin"
        with pytest.raises(FileAccessError) as exc_info:
            write_stream(iter([b"x"]), str(target))
        assert exc_info.value.source == "output_file"

    def test_failure_before_first_chunk_leaves_no_file(self, tmp_path: Path) -> None:
        target = tmp_path / "out.bin"

        def chunks() -> Iterator[bytes]:
            raise RuntimeError("remote failed")
            yield b""  # pragma: no cover

        with pytest.raises(RuntimeError):
            write_stream(chunks(), str(target))
        assert not target.exists()

    def test_failure_mid_copy_keeps_partial_file(self, tmp_path: Path) -> None:
        target = tmp_path / "out.bin"

        def chunks() -> Iterator[bytes]:
            yield b"partial"
            raise RuntimeError("connection reset")

        with pytest.raises(RuntimeError):
            write_stream(chunks(), str(target))
        assert target.read_bytes() == b"partial"
