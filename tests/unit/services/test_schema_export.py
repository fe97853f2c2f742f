"""
Tests for the Schema Export Service.
"""

import json

import yaml


class TestBuildJsonSchemas:
    def test_one_document_per_shape(self) -> None:
        from openrouter_contract.services.schema_export import (
            SCHEMA_SHAPES,
            build_json_schemas,
        )

        schemas = build_json_schemas()

        assert set(schemas) == set(SCHEMA_SHAPES)
        assert schemas["config"]["title"] == "Config"
        assert schemas["response"]["title"] == "Response"

    def test_wire_names_used(self) -> None:
        from openrouter_contract.services.schema_export import build_json_schemas

        text = json.dumps(build_json_schemas())

        assert '"inputAudio"' in text
        assert '"videoUrl"' in text
        assert '"fileData"' in text
        assert '"httpReferer"' in text
        assert '"schema_"' not in text

    def test_documents_are_json_serializable(self) -> None:
        from openrouter_contract.services.schema_export import build_json_schemas

        for schema in build_json_schemas().values():
            assert json.loads(json.dumps(schema)) == schema


class TestExportSchemas:
    def test_writes_json_and_yaml(self, tmp_path) -> None:
        from openrouter_contract.services.schema_export import export_schemas

        written = export_schemas(tmp_path / "schemas")

        assert len(written) == 8
        assert {p.suffix for p in written} == {".json", ".yaml"}
        assert all(p.exists() for p in written)

    def test_yaml_matches_json(self, tmp_path) -> None:
        from openrouter_contract.services.schema_export import export_schemas

        export_schemas(tmp_path)

        from_json = json.loads((tmp_path / "message.json").read_text())
        from_yaml = yaml.safe_load((tmp_path / "message.yaml").read_text())
        assert from_json == from_yaml

    def test_export_logged(self, tmp_path, log_stream) -> None:
        from openrouter_contract.services.schema_export import export_schemas

        export_schemas(tmp_path)

        events = [json.loads(line) for line in log_stream.getvalue().splitlines()]
        exported = [e["shape"] for e in events if e["event"] == "schema exported"]
        assert exported == ["config", "message", "response", "generation_stats"]


class TestUnionTags:
    def test_tags_listed_as_required(self) -> None:
        from openrouter_contract.services.schema_export import build_json_schemas

        schemas = build_json_schemas()
        config_defs = schemas["config"]["$defs"]
        message_defs = schemas["message"]["$defs"]

        assert "route" in config_defs["FallbackConfig"]["required"]
        assert "route" not in config_defs["SingleModelConfig"].get("required", [])
        for name in ("FileParserPlugin", "WebPlugin", "ResponseHealingPlugin"):
            assert "id" in config_defs[name]["required"]
        for name in (
            "JsonObjectResponseFormat",
            "JsonSchemaResponseFormat",
            "ObjectSchema",
            "ArraySchema",
        ):
            assert "type" in config_defs[name]["required"]
        for name in ("TextContent", "ImageUrlContent", "FileContent"):
            assert "type" in message_defs[name]["required"]

    def test_python_construction_keeps_tag_default(self) -> None:
        from openrouter_contract.models.content import TextContent
        from openrouter_contract.models.plugins import ResponseHealingPlugin

        assert TextContent(text="hi").type == "text"
        assert ResponseHealingPlugin().id == "response-healing"
