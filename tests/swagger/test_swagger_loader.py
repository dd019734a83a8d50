"""
Unit tests for building models from Swagger definitions.
"""

import json
from datetime import datetime

import pytest

from cells_client.api_client import get_model
from cells_client.core.dto import UNSET, BaseDTO
from cells_client.core.errors import SchemaError
from cells_client.model import RestProcess
from cells_client.swagger import load_swagger, to_snake_case
from cells_client.swagger.loader import classify_type
from cells_client.swagger.schema import SwaggerSchema


DOCUMENT = {
    "swagger": "2.0",
    "info": {"title": "Pydio Cells Rest API", "version": "1.0"},
    "definitions": {
        "TestJobsTaskStatus": {
            "type": "string",
            "enum": ["Unknown", "Idle", "Running", "Finished"],
            "default": "Unknown",
        },
        "TestJobsTask": {
            "type": "object",
            "description": "A task of a scheduled job.",
            "properties": {
                "ID": {"type": "string"},
                "JobID": {"type": "string"},
                "Status": {"$ref": "#/definitions/TestJobsTaskStatus"},
                "StartTime": {"type": "integer", "format": "int32"},
                "Progress": {"type": "number", "format": "float"},
                "CanPause": {"type": "boolean"},
                "Updated": {"type": "string", "format": "date-time"},
                "Labels": {"type": "object", "additionalProperties": {"type": "string"}},
                "Logs": {"type": "array", "items": {"$ref": "#/definitions/TestJobsLog"}},
                "Payload": {"type": "string", "format": "byte"},
                "Extra": {},
            },
        },
        "TestJobsLog": {
            "type": "object",
            "properties": {"Msg": {"type": "string"}, "Level": {"type": "string"}},
        },
        "TestEmptyResponse": {"type": "object"},
    },
}


class TestToSnakeCase:
    """Test attribute naming."""

    def test_common_wire_names(self):
        """Test Cells-style wire names."""
        assert to_snake_case("PeerId") == "peer_id"
        assert to_snake_case("ParentID") == "parent_id"
        assert to_snake_case("ID") == "id"
        assert to_snake_case("MetricsPort") == "metrics_port"
        assert to_snake_case("type_url") == "type_url"

    def test_invalid_identifiers(self):
        """Test names that are not valid Python identifiers."""
        assert to_snake_case("@type") == "_type"
        assert to_snake_case("2fa") == "_2fa"
        assert to_snake_case("class") == "class_"
        assert to_snake_case("to_dict") == "to_dict_"


class TestClassifyType:
    """Test mapping of property schemas to type tags."""

    def test_tags(self):
        """Test each supported schema shape."""
        cases = [
            ({"type": "string"}, "String"),
            ({"type": "string", "format": "int64"}, "String"),
            ({"type": "string", "format": "date-time"}, "Date"),
            ({"type": "string", "format": "byte"}, "Blob"),
            ({"type": "integer"}, "Integer"),
            ({"type": "number"}, "Number"),
            ({"type": "boolean"}, "Boolean"),
            ({}, "Object"),
            ({"type": "object"}, "Object"),
            ({"$ref": "#/definitions/RestProcess"}, "RestProcess"),
            ({"type": "array", "items": {"type": "integer"}}, ["Integer"]),
            ({"type": "object", "additionalProperties": {"type": "boolean"}}, {"String": "Boolean"}),
        ]
        for raw, expected in cases:
            assert classify_type(SwaggerSchema.model_validate(raw), "prop") == expected

    def test_unsupported_shapes(self):
        """Test schemas the loader refuses."""
        with pytest.raises(SchemaError):
            classify_type(SwaggerSchema.model_validate({"type": "array"}), "prop")
        with pytest.raises(SchemaError):
            classify_type(SwaggerSchema.model_validate({"$ref": "other.json#/X"}), "prop")
        with pytest.raises(SchemaError):
            classify_type(SwaggerSchema.model_validate({"type": "file"}), "prop")


class TestLoadSwagger:
    """Test loading and using generated models."""

    def test_builds_enum_and_classes(self, clean_registry):
        """Test the generated classes and their tables."""
        models = load_swagger(DOCUMENT)

        assert set(models) == {"TestJobsTaskStatus", "TestJobsTask", "TestJobsLog"}
        task_cls = models["TestJobsTask"]
        assert issubclass(task_cls, BaseDTO)
        assert task_cls.__doc__ == "A task of a scheduled job."
        assert task_cls.attribute_map["job_id"] == "JobID"
        assert task_cls.swagger_types["logs"] == ["TestJobsLog"]
        assert get_model("TestJobsTask") is task_cls
        assert models["TestJobsTaskStatus"]("Running").name == "RUNNING"

    def test_generated_model_converts_payload(self, clean_registry):
        """Test that generated models behave like built-in ones."""
        load_swagger(DOCUMENT)
        task_cls = get_model("TestJobsTask")

        task = task_cls.construct_from_object(
            {
                "ID": "t1",
                "Status": "Running",
                "StartTime": "1700000000",
                "CanPause": True,
                "Updated": "2024-05-01T12:00:00Z",
                "Labels": {"owner": "admin"},
                "Logs": [{"Msg": "started"}, {"Msg": "step", "Level": "debug"}],
                "Unknown": "ignored",
            }
        )

        assert task.id == "t1"
        assert task.status is get_model("TestJobsTaskStatus").RUNNING
        assert task.start_time == 1700000000
        assert isinstance(task.updated, datetime)
        assert task.labels == {"owner": "admin"}
        assert [log.msg for log in task.logs] == ["started", "step"]
        assert task.logs[0].level is UNSET
        assert task.progress is UNSET
        assert task.to_dict()["Status"] == "Running"

    def test_builtin_kept_unless_replace(self, clean_registry):
        """Test that built-in registrations win by default."""
        document = {
            "definitions": {
                "RestProcess": {"type": "object", "properties": {"ID": {"type": "string"}}},
            }
        }
        models = load_swagger(document)
        assert get_model("RestProcess") is RestProcess
        assert models["RestProcess"] is not RestProcess

        replaced = load_swagger(document, replace=True)
        assert get_model("RestProcess") is replaced["RestProcess"]

    def test_load_from_file(self, clean_registry, tmp_path):
        """Test reading the document from disk."""
        path = tmp_path / "swagger.json"
        path.write_text(json.dumps(DOCUMENT))
        models = load_swagger(str(path))
        assert "TestJobsLog" in models

    def test_missing_file(self, tmp_path):
        """Test an unreadable path."""
        with pytest.raises(SchemaError):
            load_swagger(tmp_path / "missing.json")

    def test_invalid_json_file(self, tmp_path):
        """Test a file that is not JSON."""
        path = tmp_path / "swagger.json"
        path.write_text("{not json")
        with pytest.raises(SchemaError):
            load_swagger(path)

    def test_invalid_document_shape(self):
        """Test a document whose definitions are not schemas."""
        with pytest.raises(SchemaError):
            load_swagger({"definitions": {"Broken": "not-a-schema"}})
