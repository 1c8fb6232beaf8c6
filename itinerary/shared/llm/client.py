"""
OpenAI client with retry logic.

Provides a cached async client instance and a wrapper for LLM calls with
automatic retries using tenacity.
"""

import os
from typing import Dict, List, Optional

from openai import AsyncOpenAI
from tenacity import (
    retry,
    stop_after_attempt,
    wait_exponential,
    retry_if_exception_type,
)
from dotenv import load_dotenv
load_dotenv()

# Module-level cache for OpenAI client
_client: Optional[AsyncOpenAI] = None

DEFAULT_MODEL = "gpt-4.1-mini"


def get_cached_client() -> AsyncOpenAI:
    """
    Returns a cached instance of the async OpenAI client.

    Uses OPENAI_API_KEY environment variable for authentication.
    The client is created once and reused for all subsequent calls.
    """
    global _client
    if _client is None:
        api_key = os.environ.get("OPENAI_API_KEY")
        if not api_key:
            raise ValueError(
                "OPENAI_API_KEY environment variable is not set. "
                "Please set it to your OpenAI API key."
            )
        _client = AsyncOpenAI(api_key=api_key)
    return _client


@retry(
    stop=stop_after_attempt(3),
    wait=wait_exponential(multiplier=1, min=2, max=10),
    retry=retry_if_exception_type((Exception,)),
    reraise=True,
)
async def call_llm(
    messages: List[Dict[str, str]],
    model: str = DEFAULT_MODEL,
    client: Optional[AsyncOpenAI] = None,
) -> str:
    """
    Call the OpenAI Chat Completion API with automatic retries.

    Args:
        messages: List of message dicts with 'role' and 'content' keys
        model: Model identifier to use (default: gpt-4.1-mini)
        client: Optional client instance. If not provided, uses cached client.

    Returns:
        The assistant's response content as a string. May be empty when
        the model returns no content; callers decide whether that is fatal.

    Raises:
        Exception: If all retry attempts fail.
    """
    if client is None:
        client = get_cached_client()

    response = await client.chat.completions.create(
        model=model,
        messages=messages,
    )

    if not response.choices:
        return ""
    return (response.choices[0].message.content or "").strip()


async def generate_text(
    prompt: str,
    model: str = DEFAULT_MODEL,
    client: Optional[AsyncOpenAI] = None,
) -> str:
    """
    Send a single user prompt and return the response text.

    This is the text-generation collaborator consumed by the generation
    pipeline: it may raise or return an empty string.
    """
    messages = [{"role": "user", "content": prompt}]
    return await call_llm(messages, model=model, client=client)
