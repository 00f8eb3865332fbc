"""Tests for watsoncli.services.registry -- catalog validation and lookup."""

from __future__ import annotations

import pytest

from watsoncli.exceptions import RegistryError
from watsoncli.models import ParameterLocation, ResultKind, ServiceSpec
from watsoncli.services.common import (
    BINARY,
    FORM,
    POST,
    file_path,
    operation,
    string,
)
from watsoncli.services.registry import (
    all_services,
    get_operation,
    get_service,
    validate_services,
)


def _service(
    *operations,
    tag: str = "demo-v1",
    aliases: tuple[str, ...] = (),
    version_required: bool = False,
) -> ServiceSpec:
    return ServiceSpec(
        tag=tag,
        aliases=aliases,
        version_required=version_required,
        credential_name="demo",
        default_url="https://demo.test",
        short_help="Demo",
        operations=operations,
    )


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


class TestValidation:
    def test_valid_catalog_returned_as_tuple(self) -> None:
        service = _service(operation("list", "List", path="/v1/things"))
        assert validate_services([service]) == (service,)

    def test_duplicate_flag(self) -> None:
        op = operation("x", "X", path="/x", flags=(string("name"), string("name")))
        with pytest.raises(RegistryError, match="duplicate flag --name"):
            validate_services([_service(op)])

    @pytest.mark.parametrize("name", ["output", "jmes_query", "output_file", "help"])
    def test_reserved_flag_name(self, name: str) -> None:
        op = operation("x", "X", path="/x", flags=(string(name),))
        with pytest.raises(RegistryError, match="framework option"):
            validate_services([_service(op)])

    def test_reserved_short(self) -> None:
        op = operation("x", "X", path="/x", flags=(string("query_text", short="q"),))
        with pytest.raises(RegistryError, match="-q is already taken"):
            validate_services([_service(op)])

    def test_short_clash(self) -> None:
        op = operation(
            "x", "X", path="/x",
            flags=(string("alpha", short="a"), string("another", short="a")),
        )
        with pytest.raises(RegistryError, match="-a is already taken"):
            validate_services([_service(op)])

    def test_path_placeholder_without_flag(self) -> None:
        op = operation("x", "X", path="/v1/things/{thing_id}")
        with pytest.raises(RegistryError, match=r"\{thing_id\}"):
            validate_services([_service(op)])

    def test_optional_path_flag(self) -> None:
        op = operation("x", "X", path="/v1/things/{thing_id}", flags=(string("thing_id"),))
        with pytest.raises(RegistryError, match="must be required"):
            validate_services([_service(op)])

    def test_unknown_sibling(self) -> None:
        op = operation(
            "x", "X", method=POST, path="/x", multipart=True,
            flags=(file_path("file", filename_flag="file_name"),),
        )
        with pytest.raises(RegistryError, match="unknown flag --file_name"):
            validate_services([_service(op)])

    def test_multipart_mixed_with_body(self) -> None:
        op = operation(
            "x", "X", method=POST, path="/x",
            flags=(string("part", location=FORM), string("field")),
        )
        with pytest.raises(RegistryError, match="mixed with a request body"):
            validate_services([_service(op)])

    def test_duplicate_operation(self) -> None:
        ops = (operation("x", "X", path="/x"), operation("x", "Again", path="/y"))
        with pytest.raises(RegistryError, match="duplicate operation name"):
            validate_services([_service(*ops)])

    def test_duplicate_command_name(self) -> None:
        first = _service(tag="demo-v1", aliases=("d1",))
        second = _service(tag="other-v1", aliases=("d1",))
        with pytest.raises(RegistryError, match="'d1' is used twice"):
            validate_services([first, second])

    def test_binary_result_needs_streaming_invoker(self) -> None:
        def invoker(*args, **kwargs):
            return b""

        op = operation("x", "X", method=POST, path="/x", result=BINARY, invoker=invoker)
        with pytest.raises(RegistryError, match="streams"):
            validate_services([_service(op)])

    def test_versioned_service_without_version_flag(self) -> None:
        op = operation("list", "List", path="/v1/things")
        with pytest.raises(RegistryError, match="^demo-v1 list: needs a required --version"):
            validate_services([_service(op, version_required=True)])

    def test_versioned_service_with_optional_version_flag(self) -> None:
        op = operation("list", "List", path="/v1/things", flags=(string("version"),))
        with pytest.raises(RegistryError, match="--version"):
            validate_services([_service(op, version_required=True)])

    def test_versioned_service_accepts_versioned_operations(self) -> None:
        op = operation("list", "List", path="/v1/things", versioned=True)
        service = _service(op, version_required=True)
        assert validate_services([service]) == (service,)

    def test_error_names_service_and_operation(self) -> None:
        op = operation("broken", "X", path="/x/{id}")
        with pytest.raises(RegistryError, match="^demo-v1 broken: "):
            validate_services([_service(op)])


# ---------------------------------------------------------------------------
# Bundled catalog
# ---------------------------------------------------------------------------


class TestCatalog:
    def test_all_services_load(self) -> None:
        services = all_services()
        assert len(services) == 13
        tags = [s.tag for s in services]
        assert "language-translator-v3" in tags
        assert "text-to-speech-v1" in tags
        assert "speech-to-text-v1" in tags
        assert len(set(tags)) == len(tags)

    def test_lookup_by_tag_and_alias(self) -> None:
        assert get_service("lt-v3").tag == "language-translator-v3"
        assert get_service("language-translator-v3") is get_service("lt-v3")

    def test_unknown_service(self) -> None:
        assert get_service("no-such-service") is None
        assert get_operation("no-such-service", "translate") is None

    def test_get_operation(self) -> None:
        op = get_operation("lt-v3", "translate")
        assert op is not None
        assert op.name == "translate"
        assert get_operation("lt-v3", "no-such-op") is None

    def test_every_operation_has_help(self) -> None:
        for service in all_services():
            for op in service.operations:
                assert op.short_help, f"{service.tag} {op.name}"

    def test_translate_document_is_multipart(self) -> None:
        op = get_operation("language-translator-v3", "translate-document")
        assert op.is_multipart
        assert op.get_flag("file").location == ParameterLocation.FILE

    def test_synthesize_streams(self) -> None:
        op = get_operation("tts-v1", "synthesize")
        assert op.result_kind == ResultKind.BINARY_STREAM

    def test_versioned_operations_require_version(self) -> None:
        op = get_operation("lt-v3", "list-models")
        version = op.get_flag("version")
        assert version.required
        assert version.short == "v"
        assert version.location == ParameterLocation.QUERY

    def test_versioned_services_declare_it(self) -> None:
        for service in all_services():
            versioned = all(op.get_flag("version") is not None for op in service.operations)
            assert versioned == service.version_required, service.tag

    def test_recognize_sends_audio_as_body(self) -> None:
        op = get_operation("stt-v1", "recognize")
        assert op.get_flag("audio").location == ParameterLocation.RAW_BODY
        assert op.get_flag("content_type").location == ParameterLocation.HEADER
        assert op.get_flag("model").location == ParameterLocation.QUERY
        assert not op.is_multipart

    def test_add_corpus_is_multipart(self) -> None:
        op = get_operation("speech-to-text-v1", "add-corpus")
        assert op.is_multipart
        assert op.get_flag("corpus_file").location == ParameterLocation.FILE
        assert op.get_flag("allow_overwrite").location == ParameterLocation.QUERY
