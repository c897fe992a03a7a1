import enum
import json
import logging
from dataclasses import dataclass
from typing import Any, List, Optional, Union

import httpx
from fastapi import Request

from stress_interview.core.config import Settings
from stress_interview.schemas import GatewayChatRequest

logger = logging.getLogger(__name__)

RATE_LIMIT_MESSAGE = "Rate limit exceeded. Please wait a moment and try again."
USAGE_LIMIT_MESSAGE = "Usage limit reached. Please add credits to continue."
NO_RESPONSE_MESSAGE = "No response from AI"


class FailureKind(str, enum.Enum):
    RATE_LIMITED = "rate_limited"
    USAGE_LIMITED = "usage_limited"
    UPSTREAM_ERROR = "upstream_error"


@dataclass(frozen=True)
class GatewayReply:
    text: str


@dataclass(frozen=True)
class GatewayFailure:
    kind: FailureKind
    message: str
    upstream_status: Optional[int] = None

    @property
    def status_code(self) -> int:
        """Status to hand back to the caller. Only rate and usage limits pass through."""
        if self.kind in (FailureKind.RATE_LIMITED, FailureKind.USAGE_LIMITED):
            return self.upstream_status
        return 500


GatewayResult = Union[GatewayReply, GatewayFailure]


def extract_reply(data: Any) -> Optional[str]:
    """Pull ``choices[0].message.content`` out of a chat-completion body."""
    try:
        content = data["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError):
        return None
    if not isinstance(content, str) or not content:
        return None
    return content


def interpret_response(status_code: int, body: str) -> GatewayResult:
    if not 200 <= status_code < 300:
        logger.error("AI Gateway error: %s %s", status_code, body)
        if status_code == 429:
            return GatewayFailure(FailureKind.RATE_LIMITED, RATE_LIMIT_MESSAGE, status_code)
        if status_code == 402:
            return GatewayFailure(FailureKind.USAGE_LIMITED, USAGE_LIMIT_MESSAGE, status_code)
        return GatewayFailure(FailureKind.UPSTREAM_ERROR, f"AI Gateway error: {status_code}", status_code)

    try:
        data = json.loads(body)
    except ValueError:
        logger.error("AI Gateway returned a non-JSON body: %.500s", body)
        return GatewayFailure(FailureKind.UPSTREAM_ERROR, NO_RESPONSE_MESSAGE, status_code)

    text = extract_reply(data)
    if text is None:
        logger.error("AI Gateway response has no message content: %.500s", body)
        return GatewayFailure(FailureKind.UPSTREAM_ERROR, NO_RESPONSE_MESSAGE, status_code)
    return GatewayReply(text)


class GatewayClient:
    def __init__(self, http: httpx.AsyncClient, settings: Settings, api_key: str):
        self.http = http
        self.settings = settings
        self.api_key = api_key

    def build_payload(self, messages: List[Any]) -> GatewayChatRequest:
        return GatewayChatRequest(
            model=self.settings.model,
            messages=messages,
            max_tokens=self.settings.max_tokens,
        )

    async def complete(self, messages: List[Any]) -> GatewayResult:
        payload = self.build_payload(messages)
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }
        try:
            r = await self.http.post(
                self.settings.gateway_url,
                json=payload.model_dump(),
                headers=headers,
                timeout=self.settings.timeout,
            )
        except httpx.HTTPError as e:
            logger.error("AI Gateway request failed: %r", e)
            return GatewayFailure(FailureKind.UPSTREAM_ERROR, str(e) or "Failed to process request")

        return interpret_response(r.status_code, r.text)


# Dependency for FastAPI routes; the client itself lives for the app's lifespan
def get_http_client(request: Request) -> httpx.AsyncClient:
    return request.app.state.http_client
