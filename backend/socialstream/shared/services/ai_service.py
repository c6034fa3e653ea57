"""
AI Services

Content tagging and room chat backed by the OpenAI adapter.

Both services are best-effort: they never raise to the caller. Missing
credentials and failed requests map to fixed fallback values so the upload
and chat flows always complete.

    Condition                 TagGenerator.suggest()       ChatResponder.reply()
    ---------                 ----------------------       ---------------------
    no OPENAI_API_KEY         DEFAULT_TAGS                 BUSY_REPLY
    request/parse failure     ERROR_TAGS                   CONNECTION_LOST_REPLY
    empty model answer        EMPTY_TAGS                   EMPTY_REPLY

Each call is attempted once and bounded by AI_TIMEOUT_SECONDS. Cancelling
the awaiting task cancels the request.
"""

from typing import Any, List, Optional, Sequence

from socialstream.shared.adapters.openai_adapter import OpenAIAdapter, get_openai_adapter
from socialstream.shared.core.logging import get_logger

logger = get_logger(__name__)


DEFAULT_TAGS = ["general", "new", "post"]
ERROR_TAGS = ["auto", "tag", "error"]
EMPTY_TAGS = ["general"]
MAX_TAGS = 5

BUSY_REPLY = "The system is busy right now."
CONNECTION_LOST_REPLY = "Connection lost..."
EMPTY_REPLY = "Haha, yes!"

TAG_SYSTEM_PROMPT = (
    "You label social media posts. Answer with a JSON array of strings only, "
    "no prose and no markdown."
)
CHAT_SYSTEM_PROMPT = (
    "You are a friendly bot chatting with viewers in a movie watch-party room. "
    "Keep answers short and fun."
)


def strip_data_uri(image: str) -> str:
    """Drop a leading 'data:<mime>;base64,' prefix if present."""
    if image.startswith("data:") and "," in image:
        return image.split(",", 1)[1]
    return image


class TagGenerator:
    """Suggests short tags for a post from its description and image."""

    def __init__(self, adapter: Optional[OpenAIAdapter] = None) -> None:
        self.adapter = adapter or get_openai_adapter()

    async def suggest(self, description: str, image: Optional[str] = None) -> List[str]:
        """
        Suggest up to five single-word tags.

        Args:
            description: Post description
            image: Optional image as a data URI or bare base64 string

        Returns:
            Lower-cased tags, or a fallback set
        """
        if not self.adapter.is_configured:
            logger.warning("OpenAI API key not configured, using default tags")
            return list(DEFAULT_TAGS)

        prompt = (
            f"Create {MAX_TAGS} short, single-word tags for this content. "
            f'Content description: "{description}". '
            "Reply only with a JSON array."
        )
        image_base64 = strip_data_uri(image) if image else None

        try:
            data = await self.adapter.complete_json(
                system_prompt=TAG_SYSTEM_PROMPT,
                user_prompt=prompt,
                image_base64=image_base64,
            )
        except Exception as e:
            logger.error("Tag generation failed", error=str(e), error_type=type(e).__name__)
            return list(ERROR_TAGS)

        return self._normalize(data)

    @staticmethod
    def _normalize(data: Any) -> List[str]:
        if data is None:
            return list(EMPTY_TAGS)
        if isinstance(data, dict):
            data = data.get("tags")
        if not isinstance(data, list):
            logger.error("Tag generation returned unexpected shape", value_type=type(data).__name__)
            return list(ERROR_TAGS)

        tags: List[str] = []
        for item in data:
            tag = str(item).strip().lstrip("#").lower()
            if tag and tag not in tags:
                tags.append(tag)
        return tags[:MAX_TAGS] or list(EMPTY_TAGS)


class ChatResponder:
    """Generates the room bot's reply to a chat message."""

    def __init__(self, adapter: Optional[OpenAIAdapter] = None) -> None:
        self.adapter = adapter or get_openai_adapter()

    async def reply(self, history: Sequence[str], new_message: str) -> str:
        """
        Reply to new_message given earlier lines of the conversation.

        Args:
            history: Prior messages rendered as "username: text"
            new_message: The message being answered

        Returns:
            Reply text, or a canned fallback
        """
        if not self.adapter.is_configured:
            logger.warning("OpenAI API key not configured, using canned reply")
            return BUSY_REPLY

        prompt = "Chat history:\n" + "\n".join(history) + f"\n\nUser: {new_message}"

        try:
            result = await self.adapter.complete(
                system_prompt=CHAT_SYSTEM_PROMPT,
                user_prompt=prompt,
            )
        except Exception as e:
            logger.error("Chat reply failed", error=str(e), error_type=type(e).__name__)
            return CONNECTION_LOST_REPLY

        return result.content.strip() or EMPTY_REPLY
