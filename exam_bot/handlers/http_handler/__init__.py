from exam_bot.handlers.http_handler.http_handler import setup_routes

__all__ = ["setup_routes"]
