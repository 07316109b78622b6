"""Agent settings document shape (``settings.json``)."""

from __future__ import annotations

from pi_schema_generator.schema_building import (
    SchemaNode,
    array,
    boolean,
    literal,
    number,
    object_,
    optional,
    string,
    union,
)

SETTINGS_SCHEMA_ID = "https://buildwithpi.ai/schemas/settings.schema.json"

THINKING_LEVELS = ("off", "minimal", "low", "medium", "high", "xhigh")
QUEUE_MODES = ("all", "one-at-a-time")
DOUBLE_ESCAPE_ACTIONS = ("fork", "tree")

_RESERVE_TOKENS_DESCRIPTION = "Tokens reserved for prompt + LLM response (default: 16384)"


def _string_list(description: str) -> SchemaNode:
    return optional(array(string(), description=description))


def _one_of_literals(values: tuple[str, ...], description: str) -> SchemaNode:
    return optional(union([literal(value) for value in values], description=description))


COMPACTION_SETTINGS_SCHEMA = object_(
    {
        "enabled": optional(
            boolean(description="Enable automatic context compaction (default: true)")
        ),
        "reserveTokens": optional(number(description=_RESERVE_TOKENS_DESCRIPTION)),
        "keepRecentTokens": optional(
            number(description="Tokens to keep from recent messages (default: 20000)")
        ),
    },
    additionalProperties=False,
)

BRANCH_SUMMARY_SETTINGS_SCHEMA = object_(
    {"reserveTokens": optional(number(description=_RESERVE_TOKENS_DESCRIPTION))},
    additionalProperties=False,
)

RETRY_SETTINGS_SCHEMA = object_(
    {
        "enabled": optional(
            boolean(description="Enable automatic retries on transient errors (default: true)")
        ),
        "maxRetries": optional(number(description="Maximum retry attempts (default: 3)")),
        "baseDelayMs": optional(
            number(description="Base delay for exponential backoff in ms (default: 2000)")
        ),
    },
    additionalProperties=False,
)

TERMINAL_SETTINGS_SCHEMA = object_(
    {
        "showImages": optional(
            boolean(description="Show images in terminal if supported (default: true)")
        ),
    },
    additionalProperties=False,
)

IMAGE_SETTINGS_SCHEMA = object_(
    {
        "autoResize": optional(
            boolean(
                description=(
                    "Resize images to 2000x2000 max for better model compatibility "
                    "(default: true)"
                )
            )
        ),
        "blockImages": optional(
            boolean(description="Prevent all images from being sent to LLM providers (default: false)")
        ),
    },
    additionalProperties=False,
)

THINKING_BUDGETS_SETTINGS_SCHEMA = object_(
    {
        level: optional(number(description=f"Token budget for {level} thinking level"))
        for level in ("minimal", "low", "medium", "high")
    },
    additionalProperties=False,
)

MARKDOWN_SETTINGS_SCHEMA = object_(
    {
        "codeBlockIndent": optional(
            string(description='Indentation for code blocks (default: "  ")')
        ),
    },
    additionalProperties=False,
)

PACKAGE_SOURCE_OBJECT_SCHEMA = object_(
    {
        "source": string(description="npm package name or git URL"),
        "extensions": _string_list("Filter to specific extensions"),
        "skills": _string_list("Filter to specific skills"),
        "prompts": _string_list("Filter to specific prompt templates"),
        "themes": _string_list("Filter to specific themes"),
    },
    additionalProperties=False,
)

PACKAGE_SOURCE_SCHEMA = union(
    [
        string(description="npm package name or git URL (loads all resources)"),
        PACKAGE_SOURCE_OBJECT_SCHEMA,
    ]
)

SETTINGS_SCHEMA = object_(
    {
        "$schema": optional(string(description="JSON Schema reference")),
        "lastChangelogVersion": optional(
            string(description="Last seen changelog version (internal use)")
        ),
        "defaultProvider": optional(
            string(description="Default LLM provider (e.g., 'anthropic', 'openai')")
        ),
        "defaultModel": optional(
            string(description="Default model ID (e.g., 'claude-sonnet-4-20250514')")
        ),
        "defaultThinkingLevel": _one_of_literals(
            THINKING_LEVELS, "Default thinking/reasoning level for models that support it"
        ),
        "steeringMode": _one_of_literals(
            QUEUE_MODES, "How to handle multiple steering messages (default: 'one-at-a-time')"
        ),
        "followUpMode": _one_of_literals(
            QUEUE_MODES, "How to handle multiple follow-up messages (default: 'one-at-a-time')"
        ),
        "theme": optional(string(description="Theme name (e.g., 'dark', 'light', 'solarized')")),
        "compaction": optional(COMPACTION_SETTINGS_SCHEMA),
        "branchSummary": optional(BRANCH_SUMMARY_SETTINGS_SCHEMA),
        "retry": optional(RETRY_SETTINGS_SCHEMA),
        "hideThinkingBlock": optional(
            boolean(description="Hide the thinking/reasoning block in output (default: false)")
        ),
        "shellPath": optional(
            string(description="Custom shell path (e.g., for Cygwin users on Windows)")
        ),
        "quietStartup": optional(boolean(description="Suppress startup messages (default: false)")),
        "shellCommandPrefix": optional(
            string(
                description=(
                    'Prefix prepended to every bash command (e.g., "shopt -s expand_aliases" '
                    "for alias support)"
                )
            )
        ),
        "collapseChangelog": optional(
            boolean(description="Show condensed changelog after update (default: false)")
        ),
        "packages": optional(
            array(
                PACKAGE_SOURCE_SCHEMA,
                description="npm/git packages to load extensions, skills, prompts, themes from",
            )
        ),
        "extensions": _string_list("Local extension file paths or directories"),
        "skills": _string_list("Local skill file paths or directories"),
        "prompts": _string_list("Local prompt template paths or directories"),
        "themes": _string_list("Local theme file paths or directories"),
        "enableSkillCommands": optional(
            boolean(description="Register skills as /skill:name commands (default: true)")
        ),
        "terminal": optional(TERMINAL_SETTINGS_SCHEMA),
        "images": optional(IMAGE_SETTINGS_SCHEMA),
        "enabledModels": _string_list(
            "Model patterns for cycling (same format as --models CLI flag)"
        ),
        "doubleEscapeAction": _one_of_literals(
            DOUBLE_ESCAPE_ACTIONS, 'Action for double-escape with empty editor (default: "tree")'
        ),
        "thinkingBudgets": optional(THINKING_BUDGETS_SETTINGS_SCHEMA),
        "editorPaddingX": optional(
            number(
                minimum=0,
                maximum=3,
                description="Horizontal padding for input editor (default: 0)",
            )
        ),
        "showHardwareCursor": optional(
            boolean(
                description="Show terminal cursor while still positioning it for IME (default: false)"
            )
        ),
        "markdown": optional(MARKDOWN_SETTINGS_SCHEMA),
    },
    schema_id=SETTINGS_SCHEMA_ID,
    title="Pi Coding Agent Settings",
    description=(
        "Configuration file for pi coding agent "
        "(~/.pi/agent/settings.json or .pi/settings.json)"
    ),
    additionalProperties=False,
)
