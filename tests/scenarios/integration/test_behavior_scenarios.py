"""End-to-end scenarios: generated documents validate real configuration files."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema
import pytest
from pi_schema_generator.generation_run import GenerationRequest, generate_schemas


@pytest.fixture(scope="module")
def generated(tmp_path_factory: pytest.TempPathFactory) -> dict[str, dict[str, Any]]:
    output_dir = tmp_path_factory.mktemp("schemas") / "pi-agent"
    outcome = generate_schemas(GenerationRequest(output_dir=output_dir))
    return {
        path.name.split(".")[0]: json.loads(path.read_text(encoding="utf-8"))
        for path in outcome.written_paths
    }


def _is_valid(document: Any, schema: dict[str, Any]) -> bool:
    validator_cls = jsonschema.validators.validator_for(schema)
    validator_cls.check_schema(schema)
    return validator_cls(schema).is_valid(document)


def test_every_generated_document_is_a_valid_draft_07_schema(
    generated: dict[str, dict[str, Any]],
) -> None:
    for name, schema in generated.items():
        jsonschema.Draft7Validator.check_schema(schema)
        assert jsonschema.validators.validator_for(schema) is jsonschema.Draft7Validator, name
        assert {"$schema", "$id", "title", "description"} <= set(schema), name


def test_settings_schema_declares_closed_root_and_compaction_section(
    generated: dict[str, dict[str, Any]],
) -> None:
    settings = generated["settings"]

    assert settings["$id"] == "https://buildwithpi.ai/schemas/settings.schema.json"
    assert settings["additionalProperties"] is False
    assert settings["title"] == "Pi Coding Agent Settings"
    assert "(~/.pi/agent/settings.json or .pi/settings.json)" in settings["description"]
    compaction = settings["properties"]["compaction"]
    assert compaction["type"] == "object"
    assert "required" not in compaction
    assert compaction["properties"]["enabled"]["type"] == "boolean"
    assert compaction["properties"]["reserveTokens"]["type"] == "number"
    assert compaction["properties"]["keepRecentTokens"]["type"] == "number"
    assert "compaction" not in settings.get("required", [])


def test_settings_schema_accepts_realistic_settings_file(
    generated: dict[str, dict[str, Any]],
) -> None:
    document = {
        "$schema": "./schemas/settings.schema.json",
        "defaultProvider": "anthropic",
        "defaultThinkingLevel": "medium",
        "compaction": {"enabled": True, "reserveTokens": 16384},
        "packages": ["pi-skills", {"source": "git:github.com/x/y", "skills": ["review"]}],
        "editorPaddingX": 2,
    }

    assert _is_valid(document, generated["settings"])


@pytest.mark.parametrize(
    "document",
    [
        {"unknownSetting": True},
        {"compaction": {"enabled": True, "extra": 1}},
        {"defaultThinkingLevel": "maximum"},
        {"editorPaddingX": 4},
        {"packages": [{"skills": ["review"]}]},
    ],
)
def test_settings_schema_rejects_invalid_settings(
    generated: dict[str, dict[str, Any]], document: dict[str, Any]
) -> None:
    assert not _is_valid(document, generated["settings"])


def test_models_schema_validates_provider_registry(generated: dict[str, dict[str, Any]]) -> None:
    model = {
        "id": "llama-3.1-8b",
        "name": "Llama 3.1 8B",
        "reasoning": False,
        "input": ["text"],
        "cost": {"input": 0, "output": 0, "cacheRead": 0, "cacheWrite": 0},
        "contextWindow": 128000,
        "maxTokens": 32000,
        "compat": {"supportsDeveloperRole": False, "maxTokensField": "max_tokens"},
    }
    document = {
        "providers": {
            "ollama": {
                "baseUrl": "http://localhost:11434/v1",
                "apiKey": "OLLAMA_API_KEY",
                "headers": {"X-Trace": "on"},
                "models": [model],
            }
        }
    }

    assert _is_valid(document, generated["models"])
    assert not _is_valid({}, generated["models"])
    broken_model = {**model, "contextWindow": 0}
    assert not _is_valid(
        {"providers": {"ollama": {"models": [broken_model]}}}, generated["models"]
    )


def test_auth_schema_accepts_api_key_entry(generated: dict[str, dict[str, Any]]) -> None:
    assert _is_valid({"work": {"type": "api_key", "key": "sk-1"}}, generated["auth"])


def test_auth_schema_rejects_api_key_entry_without_key(
    generated: dict[str, dict[str, Any]],
) -> None:
    assert not _is_valid({"work": {"type": "api_key"}}, generated["auth"])


def test_auth_schema_allows_provider_specific_oauth_fields(
    generated: dict[str, dict[str, Any]],
) -> None:
    document = {
        "openai-codex": {
            "type": "oauth",
            "access": "a",
            "refresh": "r",
            "expires": 1760000000000,
            "accountId": "acct",
            "projectId": "extra-field",
        },
        "personal": {"type": "api_key", "key": "sk-2"},
    }

    assert _is_valid(document, generated["auth"])
    assert not _is_valid(
        {"p": {"type": "api_key", "key": "sk", "extra": True}}, generated["auth"]
    )
    assert not _is_valid({"p": {"type": "oauth", "access": "a"}}, generated["auth"])
