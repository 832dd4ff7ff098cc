from exam_bot.services.prompt_service.prompt_service import PromptService

__all__ = ["PromptService"]
