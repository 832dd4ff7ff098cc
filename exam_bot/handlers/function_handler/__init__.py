from exam_bot.handlers.function_handler.function_handler import handler

__all__ = ["handler"]
