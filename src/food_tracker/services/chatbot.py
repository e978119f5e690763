"""Scripted diet chatbot returning canned responses."""

import asyncio
import random
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime

from food_tracker.domain.chat import ChatMessage

GREETING = (
    "Hi! I'm your nutrition coach. I can help you with diet advice, meal "
    "planning, and answering nutrition questions. What would you like to know?"
)

BOT_RESPONSES: tuple[str, ...] = (
    "That's a great question! For optimal protein intake, aim for 0.8-1g per kg "
    "of body weight for general health, or 1.2-2g per kg if you're active or "
    "building muscle.",
    "Meal prep is key to success! Try preparing proteins in bulk, pre-cutting "
    "vegetables, and having healthy snacks ready. What specific meals are you "
    "struggling with?",
    "For weight loss, focus on creating a moderate calorie deficit while eating "
    "nutrient-dense foods. Include plenty of vegetables, lean proteins, and "
    "whole grains.",
    "Staying hydrated is crucial! Aim for 8-10 glasses of water daily, more if "
    "you're active. You can also get hydration from fruits and vegetables.",
    "Complex carbs like oats, quinoa, and sweet potatoes provide sustained "
    "energy. Simple carbs are best around workouts for quick fuel.",
    "Healthy fats are essential! Include sources like avocados, nuts, olive "
    "oil, and fatty fish. They help with nutrient absorption and hormone "
    "production.",
)


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class DietChatbot:
    """Stateless responder; the message text is ignored."""

    delay_seconds: float = 1.5
    responses: tuple[str, ...] = BOT_RESPONSES
    rng: random.Random = field(default_factory=random.Random)

    async def reply(self, text: str) -> str:
        """Return a random canned response after the artificial delay."""
        await asyncio.sleep(self.delay_seconds)
        return self.rng.choice(self.responses)


@dataclass
class ChatSession:
    """Conversation log for the chat page."""

    chatbot: DietChatbot
    clock: Callable[[], datetime] = _utc_now
    messages: list[ChatMessage] = field(default_factory=list)
    _last_id: int = field(default=0, init=False, repr=False)

    def __post_init__(self) -> None:
        if not self.messages:
            self.messages.append(
                ChatMessage(id=1, text=GREETING, sender="bot", timestamp=self.clock())
            )
        self._last_id = max(message.id for message in self.messages)

    async def send(self, text: str) -> ChatMessage | None:
        """Record a user message and return the bot's reply; blanks are ignored."""
        if not text.strip():
            return None
        self.messages.append(
            ChatMessage(
                id=self._next_id(), text=text, sender="user", timestamp=self.clock()
            )
        )
        reply_text = await self.chatbot.reply(text)
        reply = ChatMessage(
            id=self._next_id(), text=reply_text, sender="bot", timestamp=self.clock()
        )
        self.messages.append(reply)
        return reply

    def _next_id(self) -> int:
        candidate = int(self.clock().timestamp() * 1000)
        self._last_id = max(candidate, self._last_id + 1)
        return self._last_id
