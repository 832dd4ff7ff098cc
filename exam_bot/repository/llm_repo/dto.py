"""DTOs for LLM repository."""

from dataclasses import dataclass


@dataclass
class CompletionMessage:
    role: str
    text: str


@dataclass
class CompletionRequest:
    model_uri: str
    messages: list[CompletionMessage]
    temperature: float = 0.3
    max_tokens: int = 2000
    stream: bool = False

    def to_payload(self) -> dict:
        return {
            "modelUri": self.model_uri,
            "completionOptions": {
                "stream": self.stream,
                "temperature": self.temperature,
                # int64 fields travel as strings in the Foundation Models API
                "maxTokens": str(self.max_tokens),
            },
            "messages": [{"role": m.role, "text": m.text} for m in self.messages],
        }
