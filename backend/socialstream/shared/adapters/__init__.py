"""
Adapters Package

External service integrations.

Contents:
=========
- base: KeyValueAdapter protocol consumed by the collection store
- redis_adapter: Redis-backed key-value substrate
- memory_adapter: In-process key-value substrate
- openai_adapter: OpenAI API client for tagging and chat

Usage:
======
    from socialstream.shared.adapters.openai_adapter import OpenAIAdapter
    from socialstream.shared.adapters.redis_adapter import RedisAdapter
"""

from socialstream.shared.adapters.base import KeyValueAdapter
from socialstream.shared.adapters.memory_adapter import MemoryAdapter
from socialstream.shared.adapters.redis_adapter import RedisAdapter
from socialstream.shared.adapters.openai_adapter import (
    CompletionResult,
    OpenAIAdapter,
    get_openai_adapter,
)

__all__ = [
    "KeyValueAdapter",
    "MemoryAdapter",
    "RedisAdapter",
    "CompletionResult",
    "OpenAIAdapter",
    "get_openai_adapter",
]
