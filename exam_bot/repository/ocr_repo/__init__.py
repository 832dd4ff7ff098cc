from exam_bot.repository.ocr_repo.dto import OCRRequest
from exam_bot.repository.ocr_repo.ocr_repo import OCRRepository

__all__ = ["OCRRequest", "OCRRepository"]
