"""Transport-independent command and reply types, plus JSON payload schemas."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, StrictStr
from pydantic import ValidationError as PydanticValidationError

from lan_music_remote.domain.shared.exceptions import ValidationError
from lan_music_remote.domain.shared.messages import ErrorMessages

TEXT_PLAIN = "text/plain"
TEXT_HTML = "text/html"
APPLICATION_JSON = "application/json"

ModelT = TypeVar("ModelT", bound=BaseModel)


@dataclass(frozen=True)
class Command:
    """One inbound request from the command channel."""

    method: str
    path: str
    body: bytes = b""
    remote: str | None = None

    @property
    def route(self) -> tuple[str, str]:
        return self.method.upper(), self.path.lower()

    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")


@dataclass(frozen=True)
class Reply:
    """Exactly one of these is produced for every command."""

    body: bytes
    status: int = 200
    content_type: str = TEXT_PLAIN

    @classmethod
    def text(cls, message: str, status: int = 200) -> Reply:
        return cls(body=message.encode("utf-8"), status=status)

    @classmethod
    def json(cls, payload: Any, status: int = 200) -> Reply:
        return cls(
            body=json.dumps(payload, ensure_ascii=False).encode("utf-8"),
            status=status,
            content_type=APPLICATION_JSON,
        )

    @classmethod
    def html(cls, content: bytes) -> Reply:
        return cls(body=content, content_type=TEXT_HTML)


class SetDevicePayload(BaseModel):
    """``{"deviceId": "2"}``; plain integers are accepted as well."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    device_id: StrictInt | StrictStr = Field(alias="deviceId")


class VolumePayload(BaseModel):
    """``{"volume": "75"}``; plain numbers are accepted as well."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    volume: StrictInt | StrictFloat | StrictStr


def parse_payload(model: type[ModelT], body: bytes) -> ModelT:
    """Validate a JSON body, turning schema errors into domain ``ValidationError``."""
    try:
        return model.model_validate_json(body)
    except PydanticValidationError as e:
        detail = "; ".join(
            f"{'.'.join(str(p) for p in err['loc']) or 'body'}: {err['msg']}" for err in e.errors()
        )
        raise ValidationError(ErrorMessages.MALFORMED_PAYLOAD.format(detail=detail)) from e
