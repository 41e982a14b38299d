"""Chat-completion client shared by the extractor and the matcher.

The client is built explicitly from Settings and passed to whoever needs
it, so tests can hand in a double with the same ``chat.completions.create``
shape.
"""
from __future__ import annotations

import json
from typing import Any

import openai
from openai import OpenAI

from hirelens.config import Settings
from hirelens.exceptions import ConfigurationError, UpstreamServiceError
from hirelens.log import get_logger

log = get_logger(__name__)


def build_client(settings: Settings) -> OpenAI:
    if not settings.api_key:
        raise ConfigurationError(
            "No API key configured — set GROQ_API_KEY in .env or enter it in the sidebar."
        )
    # No transport-level retries.
    return OpenAI(
        api_key=settings.api_key,
        base_url=settings.base_url,
        timeout=settings.timeout_seconds,
        max_retries=0,
    )


def _parse_json_object(raw: str, service: str) -> dict[str, Any]:
    start = raw.find("{")
    end = raw.rfind("}") + 1
    if start == -1 or end == 0:
        raise UpstreamServiceError(f"{service.capitalize()} did not return valid JSON", service=service)
    try:
        data = json.loads(raw[start:end])
    except json.JSONDecodeError as exc:
        raise UpstreamServiceError(
            f"{service.capitalize()} returned malformed JSON: {exc.msg}", service=service
        ) from exc
    if not isinstance(data, dict):
        raise UpstreamServiceError(f"{service.capitalize()} did not return a JSON object", service=service)
    return data


def complete_json(
    client: Any,
    settings: Settings,
    *,
    system: str,
    prompt: str,
    service: str,
) -> dict[str, Any]:
    """Send one prompt and return the decoded JSON object from the reply."""
    try:
        resp = client.chat.completions.create(
            model=settings.model,
            messages=[
                {"role": "system", "content": system},
                {"role": "user", "content": prompt},
            ],
            max_tokens=settings.max_tokens,
            temperature=settings.temperature,
            response_format={"type": "json_object"},
        )
    except openai.APITimeoutError as exc:
        log.error("%s request timed out: %s", service, exc)
        raise UpstreamServiceError(
            f"The {service} service timed out. Please try again.", service=service
        ) from exc
    except openai.APIError as exc:
        log.error("%s request failed: %s", service, exc)
        raise UpstreamServiceError(
            f"Failed to get a response from the {service} service: {exc}", service=service
        ) from exc

    try:
        raw = (resp.choices[0].message.content or "").strip()
    except (AttributeError, IndexError, TypeError) as exc:
        raise UpstreamServiceError(f"{service.capitalize()} returned an empty response", service=service) from exc
    if not raw:
        raise UpstreamServiceError(f"{service.capitalize()} returned an empty response", service=service)

    log.debug("%s replied with %d chars", service, len(raw))
    return _parse_json_object(raw, service)
