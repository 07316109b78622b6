"""Credential storage document shape (``auth.json``).

The root is an open mapping keyed by user-chosen profile names, so unlike the
other documents it does not set ``additionalProperties: false``. OAuth entries
stay open as well because providers attach their own fields to them.
"""

from __future__ import annotations

from pi_schema_generator.schema_building import (
    literal,
    number,
    object_,
    optional,
    record,
    string,
    union,
)

AUTH_SCHEMA_ID = "https://buildwithpi.ai/schemas/auth.schema.json"

API_KEY_CREDENTIAL_SCHEMA = object_(
    {
        "type": literal("api_key"),
        "key": string(description="The API key value"),
    },
    additionalProperties=False,
)

OAUTH_CREDENTIAL_SCHEMA = object_(
    {
        "type": literal("oauth"),
        "access": string(description="OAuth access token"),
        "refresh": string(description="OAuth refresh token"),
        "expires": number(description="Token expiration timestamp (ms since epoch)"),
        # Provider-specific, e.g. openai-codex.
        "accountId": optional(string(description="Account ID (provider-specific)")),
    },
    additionalProperties=True,
    description="OAuth credentials (may include provider-specific fields)",
)

AUTH_CREDENTIAL_SCHEMA = union(
    [API_KEY_CREDENTIAL_SCHEMA, OAUTH_CREDENTIAL_SCHEMA],
    description="Credential entry (API key or OAuth tokens)",
)

AUTH_STORAGE_SCHEMA = record(
    string(),
    AUTH_CREDENTIAL_SCHEMA,
    schema_id=AUTH_SCHEMA_ID,
    title="Pi Coding Agent Auth Storage",
    description="Credential storage for API keys and OAuth tokens (~/.pi/agent/auth.json)",
)
