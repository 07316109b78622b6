"""Model and provider registry document shape (``models.json``)."""

from __future__ import annotations

from pi_schema_generator.schema_building import (
    SchemaNode,
    array,
    boolean,
    literal,
    number,
    object_,
    optional,
    record,
    string,
    union,
)

MODELS_SCHEMA_ID = "https://buildwithpi.ai/schemas/models.schema.json"


def _flag(description: str) -> SchemaNode:
    return optional(boolean(description=description))


OPENROUTER_ROUTING_SCHEMA = object_(
    {
        "only": optional(array(string(), description="Only use these providers")),
        "order": optional(array(string(), description="Prefer providers in this order")),
    },
    additionalProperties=False,
)

OPENAI_COMPLETIONS_COMPAT_SCHEMA = object_(
    {
        "supportsStore": _flag("Supports store parameter"),
        "supportsDeveloperRole": _flag("Supports developer role messages"),
        "supportsReasoningEffort": _flag("Supports reasoning_effort parameter"),
        "supportsUsageInStreaming": _flag("Reports usage in streaming responses"),
        "maxTokensField": optional(
            union(
                [literal("max_completion_tokens"), literal("max_tokens")],
                description="Which field to use for max tokens",
            )
        ),
        "requiresToolResultName": _flag("Requires name field in tool results"),
        "requiresAssistantAfterToolResult": _flag("Requires assistant message after tool result"),
        "requiresThinkingAsText": _flag("Requires thinking content as text"),
        "requiresMistralToolIds": _flag("Requires Mistral-style tool IDs"),
        "thinkingFormat": optional(
            union([literal("openai"), literal("zai")], description="Thinking block format")
        ),
        "openRouterRouting": optional(OPENROUTER_ROUTING_SCHEMA),
    },
    additionalProperties=False,
)

OPENAI_RESPONSES_COMPAT_SCHEMA = object_(
    {}, additionalProperties=False, description="Reserved for future use"
)

OPENAI_COMPAT_SCHEMA = union(
    [OPENAI_COMPLETIONS_COMPAT_SCHEMA, OPENAI_RESPONSES_COMPAT_SCHEMA],
    description="OpenAI API compatibility settings",
)

MODEL_COST_SCHEMA = object_(
    {
        "input": number(description="Cost per million input tokens in USD"),
        "output": number(description="Cost per million output tokens in USD"),
        "cacheRead": number(description="Cost per million cached input tokens in USD"),
        "cacheWrite": number(description="Cost per million cache write tokens in USD"),
    },
    additionalProperties=False,
)

MODEL_DEFINITION_SCHEMA = object_(
    {
        "id": string(minLength=1, description="Model ID (e.g., 'gpt-4o')"),
        "name": string(minLength=1, description="Display name (e.g., 'GPT-4o')"),
        "api": optional(
            string(
                minLength=1,
                description=(
                    "API type (overrides provider-level api). "
                    "E.g., 'openai-chat-stream', 'anthropic-stream'"
                ),
            )
        ),
        "reasoning": boolean(description="Whether the model supports extended thinking/reasoning"),
        "input": array(
            union([literal("text"), literal("image")]),
            description="Supported input modalities",
        ),
        "cost": MODEL_COST_SCHEMA,
        "contextWindow": number(minimum=1, description="Maximum context window size in tokens"),
        "maxTokens": number(minimum=1, description="Maximum output tokens"),
        "headers": optional(
            record(
                string(),
                string(),
                description="Custom headers for this model (overrides provider headers)",
            )
        ),
        "compat": optional(OPENAI_COMPAT_SCHEMA),
    },
    additionalProperties=False,
)

PROVIDER_CONFIG_SCHEMA = object_(
    {
        "baseUrl": optional(string(minLength=1, description="Base URL for API requests")),
        "apiKey": optional(
            string(
                minLength=1,
                description=(
                    "API key, env var name, or shell command (prefix with !). "
                    "E.g., 'OPENAI_API_KEY' or '!op read ...'"
                ),
            )
        ),
        "api": optional(
            string(
                minLength=1,
                description=(
                    "Default API type for all models. "
                    "E.g., 'openai-chat-stream', 'anthropic-stream'"
                ),
            )
        ),
        "headers": optional(
            record(
                string(),
                string(),
                description=(
                    "Custom headers for all models. "
                    "Values can be env var names or shell commands (prefix with !)"
                ),
            )
        ),
        "authHeader": _flag("Add Authorization: Bearer header with resolved apiKey (default: false)"),
        "models": optional(array(MODEL_DEFINITION_SCHEMA, description="Custom model definitions")),
    },
    additionalProperties=False,
)

MODELS_CONFIG_SCHEMA = object_(
    {
        "$schema": optional(string(description="JSON Schema reference")),
        "providers": record(
            string(),
            PROVIDER_CONFIG_SCHEMA,
            description="Provider configurations keyed by provider name",
        ),
    },
    schema_id=MODELS_SCHEMA_ID,
    title="Pi Coding Agent Models Configuration",
    description="Custom models and provider configuration (~/.pi/agent/models.json)",
    additionalProperties=False,
)
