"""Application constants."""

# Telegram rejects longer messages
MAX_MESSAGE_LENGTH = 4096

# Reply to /start and /help
ONBOARDING_MESSAGE = (
    "Я помогу подготовить ответ на экзаменационный вопрос по дисциплине "
    "\"Операционные системы\".\n"
    "Пришлите мне фотографию с вопросом или наберите его текстом."
)

UNSUPPORTED_INPUT_MESSAGE = "Я могу обработать только текстовое сообщение или фотографию."

# Sent instead of an answer when the completion call fails
ANSWER_FAILED_MESSAGE = "Я не смог подготовить ответ на экзаменационный вопрос."

# Sent when the photo cannot be downloaded or recognized (lenient mode only)
PHOTO_FAILED_MESSAGE = "Я не могу обработать эту фотографию."

# Completion succeeded but returned no alternatives
NO_ANSWER_SENTINEL = "no answer :("

DEFAULT_SYSTEM_PROMPT = (
    "Ты преподаватель по компьютерным наукам. Ответь на следующие билеты на экзамене"
)
