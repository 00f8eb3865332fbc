"""Tests for watsoncli.generator.command_tree.

Covers:
- register_services attaches one sub-app per service, aliases included
- Generated commands expose the operation's flags plus framework options
- --output_file exists only on binary operations
- run_callback receives only the flags the user supplied
- Required flags are enforced by the option parser
- Help text comes from the operation descriptors
"""

from __future__ import annotations

from typing import Any

import pytest
import typer
from typer.testing import CliRunner

from watsoncli.generator.command_tree import _build_help_text, register_services
from watsoncli.models import InvocationContext, OutputChoice, ServiceSpec
from watsoncli.services.common import (
    BINARY,
    POST,
    boolean,
    date,
    int64,
    operation,
    string,
    string_list,
)

runner = CliRunner()


# ---------------------------------------------------------------------------
# Fixture helpers
# ---------------------------------------------------------------------------


def _service() -> ServiceSpec:
    return ServiceSpec(
        tag="demo-service-v1",
        aliases=("demo",),
        credential_name="demo_service",
        default_url="https://demo.test",
        short_help="Demo service",
        operations=(
            operation(
                "create-thing",
                "Create a thing",
                "Create a thing with the given name.",
                method=POST,
                path="/v1/things",
                flags=(
                    string("name", "Name of the thing.", required=True),
                    string("description", "Description."),
                    int64("limit", "Limit.", default_value=10),
                    boolean("export", "Export.", default_value=False),
                    string_list("tags", "Tags."),
                    date("before", "Before."),
                    string("from", "A keyword-named flag."),
                ),
            ),
            operation(
                "synthesize",
                "Synthesize audio",
                method=POST,
                path="/v1/synthesize",
                result=BINARY,
                flags=(string("text", "Text.", required=True),),
            ),
        ),
    )


class _Recorder:
    def __init__(self) -> None:
        self.calls: list[tuple[str, dict[str, Any], InvocationContext]] = []

    def __call__(self, service, operation, supplied, context) -> None:
        self.calls.append((operation.name, dict(supplied), context))


@pytest.fixture
def recorder() -> _Recorder:
    return _Recorder()


@pytest.fixture
def app(recorder: _Recorder, isolated_env) -> typer.Typer:
    root = typer.Typer(no_args_is_help=True, rich_markup_mode=None)

    @root.callback()
    def _root() -> None:
        pass

    register_services(root, [_service()], run_callback=recorder)
    return root


# ---------------------------------------------------------------------------
# Tree shape
# ---------------------------------------------------------------------------


class TestTreeShape:
    def test_service_listed(self, app: typer.Typer) -> None:
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "demo-service-v1" in result.output

    def test_alias_hidden_but_callable(self, app: typer.Typer, recorder: _Recorder) -> None:
        result = runner.invoke(app, ["demo", "create-thing", "--name", "X"])
        assert result.exit_code == 0, result.output
        assert recorder.calls[0][0] == "create-thing"

    def test_operations_listed(self, app: typer.Typer) -> None:
        result = runner.invoke(app, ["demo-service-v1", "--help"])
        assert result.exit_code == 0
        assert "create-thing" in result.output
        assert "synthesize" in result.output

    def test_operation_help(self, app: typer.Typer) -> None:
        result = runner.invoke(app, ["demo-service-v1", "create-thing", "--help"])
        assert result.exit_code == 0
        assert "--name" in result.output
        assert "--output" in result.output
        assert "--jmes_query" in result.output
        assert "--output_file" not in result.output
        assert "service default: 10" in result.output

    def test_binary_operation_has_output_file(self, app: typer.Typer) -> None:
        result = runner.invoke(app, ["demo-service-v1", "synthesize", "--help"])
        assert "--output_file" in result.output
        assert "--output " in result.output or "--output\n" in result.output


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------


class TestDispatch:
    def test_only_supplied_flags(self, app: typer.Typer, recorder: _Recorder) -> None:
        result = runner.invoke(app, ["demo-service-v1", "create-thing", "--name", "X"])
        assert result.exit_code == 0, result.output
        name, supplied, context = recorder.calls[0]
        assert supplied == {"name": "X"}
        assert context.output_format == OutputChoice.TABLE
        assert context.jmes_query is None
        assert context.output_file is None

    def test_all_kinds_supplied(self, app: typer.Typer, recorder: _Recorder) -> None:
        result = runner.invoke(
            app,
            [
                "demo-service-v1", "create-thing",
                "--name", "X",
                "--limit", "10",
                "--no-export",
                "--tags", "a,b", "--tags", "c",
                "--before", "2019-01-01",
                "--from", "here",
            ],
        )
        assert result.exit_code == 0, result.output
        supplied = recorder.calls[0][1]
        assert supplied == {
            "name": "X",
            "limit": 10,
            "export": False,
            "tags": ["a,b", "c"],
            "before": "2019-01-01",
            "from": "here",
        }

    def test_framework_options(self, app: typer.Typer, recorder: _Recorder) -> None:
        result = runner.invoke(
            app,
            ["demo-service-v1", "create-thing", "--name", "X", "--output", "JSON", "-q", "id"],
        )
        assert result.exit_code == 0, result.output
        context = recorder.calls[0][2]
        assert context.output_format == OutputChoice.JSON
        assert context.jmes_query == "id"

    def test_output_file_passed(self, app: typer.Typer, recorder: _Recorder) -> None:
        result = runner.invoke(
            app,
            ["demo-service-v1", "synthesize", "--text", "hi", "--output_file", "out.wav"],
        )
        assert result.exit_code == 0, result.output
        assert recorder.calls[0][1] == {"text": "hi"}
        assert recorder.calls[0][2].output_file == "out.wav"

    def test_output_format_from_environment(
        self, app: typer.Typer, recorder: _Recorder, monkeypatch
    ) -> None:
        monkeypatch.setenv("WATSON_OUTPUT", "yaml")
        runner.invoke(app, ["demo-service-v1", "create-thing", "--name", "X"])
        assert recorder.calls[0][2].output_format == OutputChoice.YAML


# ---------------------------------------------------------------------------
# Parser-level validation
# ---------------------------------------------------------------------------


class TestValidation:
    def test_missing_required_flag(self, app: typer.Typer, recorder: _Recorder) -> None:
        result = runner.invoke(app, ["demo-service-v1", "create-thing"])
        assert result.exit_code != 0
        assert "--name" in result.output
        assert recorder.calls == []

    def test_missing_output_file(self, app: typer.Typer, recorder: _Recorder) -> None:
        result = runner.invoke(app, ["demo-service-v1", "synthesize", "--text", "hi"])
        assert result.exit_code != 0
        assert "--output_file" in result.output
        assert recorder.calls == []

    def test_output_file_rejected_on_value_operation(
        self, app: typer.Typer, recorder: _Recorder
    ) -> None:
        result = runner.invoke(
            app,
            ["demo-service-v1", "create-thing", "--name", "X", "--output_file", "x"],
        )
        assert result.exit_code != 0
        assert recorder.calls == []

    def test_unknown_output_format(self, app: typer.Typer, recorder: _Recorder) -> None:
        result = runner.invoke(
            app, ["demo-service-v1", "create-thing", "--name", "X", "--output", "xml"]
        )
        assert result.exit_code != 0
        assert recorder.calls == []

    def test_bad_integer(self, app: typer.Typer, recorder: _Recorder) -> None:
        result = runner.invoke(
            app, ["demo-service-v1", "create-thing", "--name", "X", "--limit", "many"]
        )
        assert result.exit_code != 0
        assert recorder.calls == []


# ---------------------------------------------------------------------------
# Help helpers
# ---------------------------------------------------------------------------


class TestBuildHelpText:
    def test_short_and_long(self) -> None:
        op = operation("x", "Short.", "Long description.", path="/x")
        assert _build_help_text(op) == "Short.\n\nLong description."

    def test_long_equal_to_short(self) -> None:
        op = operation("x", "Same.", "Same.", path="/x")
        assert _build_help_text(op) == "Same."
