"""DTOs for OCR repository."""

from dataclasses import dataclass, field


@dataclass
class OCRRequest:
    content: str
    mime_type: str = "JPEG"
    language_codes: list[str] = field(default_factory=lambda: ["ru"])
    model: str = "page"

    def to_payload(self) -> dict:
        return {
            "mimeType": self.mime_type,
            "languageCodes": self.language_codes,
            "model": self.model,
            "content": self.content,
        }
