"""JSON schema definition for reporter output."""
from __future__ import annotations

SCHEMA_VERSION = "1.0.0"

JSON_SCHEMA_V1 = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "goldcheck report",
    "type": "object",
    "required": ["schema_version", "generated_at", "verdict", "exit_code", "build", "summary", "fixtures"],
    "properties": {
        "schema_version": {"type": "string"},
        "generated_at": {"type": "string", "format": "date-time"},
        "verdict": {"type": "string", "enum": ["all_passed", "any_failed", "build_failed"]},
        "exit_code": {"type": "integer", "enum": [0, 1]},
        "build": {
            "type": "object",
            "required": ["label", "ok"],
            "properties": {
                "label": {"type": "string"},
                "ok": {"type": "boolean"},
                "returncode": {"type": ["integer", "null"]},
                "artifact": {"type": ["string", "null"]},
                "diagnostics": {"type": "string"},
            },
        },
        "summary": {
            "type": "object",
            "required": ["total", "passed", "failed", "timed_out", "duration_s"],
            "properties": {
                "total": {"type": "integer"},
                "passed": {"type": "integer"},
                "failed": {"type": "integer"},
                "timed_out": {"type": "integer"},
                "duration_s": {"type": "number"},
            },
        },
        "fixtures": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["name", "status", "message", "duration_ms", "input", "expected", "actual"],
                "properties": {
                    "name": {"type": "string"},
                    "status": {"type": "string", "enum": ["passed", "failed", "timed_out"]},
                    "message": {"type": "string"},
                    "returncode": {"type": ["integer", "null"]},
                    "duration_ms": {"type": "number"},
                    "input": {"type": "string"},
                    "expected": {"type": "string"},
                    "actual": {"type": "string"},
                },
            },
        },
    },
}
