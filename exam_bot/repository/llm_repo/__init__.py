from exam_bot.repository.llm_repo.dto import CompletionMessage, CompletionRequest
from exam_bot.repository.llm_repo.llm_repo import CompletionRepository

__all__ = ["CompletionMessage", "CompletionRequest", "CompletionRepository"]
