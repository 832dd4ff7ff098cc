"""DTOs for the serverless function handler (API Gateway v1 envelope)."""

import base64
from dataclasses import dataclass, field
from typing import Any


@dataclass
class APIGatewayRequest:
    http_method: str = ""
    path: str = ""
    headers: dict[str, str] = field(default_factory=dict)
    body: str = ""
    is_base64_encoded: bool = False
    request_context: Any = None

    @classmethod
    def from_event(cls, event: dict[str, Any]) -> "APIGatewayRequest":
        return cls(
            http_method=event.get("httpMethod") or "",
            path=event.get("path") or "",
            headers=event.get("headers") or {},
            body=event.get("body") or "",
            is_base64_encoded=bool(event.get("isBase64Encoded", False)),
            request_context=event.get("requestContext"),
        )

    def decoded_body(self) -> bytes:
        if self.is_base64_encoded:
            return base64.b64decode(self.body, validate=True)
        return self.body.encode("utf-8")


@dataclass
class APIGatewayResponse:
    status_code: int = 200
    headers: dict[str, str] = field(default_factory=dict)
    multi_value_headers: dict[str, list[str]] = field(default_factory=dict)
    body: str = ""
    is_base64_encoded: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "statusCode": self.status_code,
            "headers": self.headers,
            "multiValueHeaders": self.multi_value_headers,
            "body": self.body,
            "isBase64Encoded": self.is_base64_encoded,
        }
