from pydantic import BaseModel, ConfigDict, StrictBool, ValidationError
from typing import Any, List, Optional

from stress_interview.services.prompt import ContinueInterview, InterviewTurn, StartInterview


class InvalidRequestError(ValueError):
    pass


class InterviewChatRequest(BaseModel):
    # only looked at when continuing; entries are forwarded to the gateway as-is
    messages: Optional[Any] = None
    isStart: Optional[StrictBool] = False
    model_config = ConfigDict(extra="ignore")

    def to_turn(self) -> InterviewTurn:
        if self.isStart:
            return StartInterview()
        if self.messages is None:
            raise InvalidRequestError("messages is required when isStart is false")
        if not isinstance(self.messages, list):
            raise InvalidRequestError("messages must be a list")
        return ContinueInterview(history=list(self.messages))


class GatewayChatRequest(BaseModel):
    model: str
    messages: List[Any]
    max_tokens: int


class InterviewChatResponse(BaseModel):
    response: str


class ErrorResponse(BaseModel):
    error: str


def parse_chat_request(raw: bytes) -> InterviewChatRequest:
    """Decode and validate an inbound body; malformed JSON and bad shapes both raise InvalidRequestError."""
    try:
        return InterviewChatRequest.model_validate_json(raw)
    except ValidationError as e:
        first = e.errors()[0]
        location = ".".join(str(part) for part in first.get("loc", ()))
        detail = f"{location}: {first['msg']}" if location else first["msg"]
        raise InvalidRequestError(f"Invalid request body ({detail})") from e
