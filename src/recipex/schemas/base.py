"""Base classes shared by every Pydantic schema in the service.

Usage:
    - APIRequest: incoming request bodies
    - APIResponse: outgoing response bodies (camelCase on the wire)
    - DownstreamResponse: payloads received from recipe providers and Groq
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _BaseSchema(BaseModel):
    """Private base schema; inherit from one of the public subclasses."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
        validate_default=True,
        serialize_by_alias=True,
    )


class APIRequest(_BaseSchema):
    """Incoming request body; unknown client fields are ignored."""

    model_config = ConfigDict(extra="ignore")


class APIResponse(_BaseSchema):
    """Outgoing response body; only declared fields may be returned."""

    model_config = ConfigDict(extra="forbid")


class DownstreamResponse(_BaseSchema):
    """Payload from an external API.

    Upstreams add fields over time, so unknown properties are ignored
    rather than failing the parse.
    """

    model_config = ConfigDict(extra="ignore")
