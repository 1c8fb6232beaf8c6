"""
Generate node for the LangGraph workflow.

Builds the itinerary prompt and asks the model for prose. The model call is
an external collaborator injected through the run config.
"""

import logging
import time
from typing import Any, Awaitable, Callable, Dict

from langchain_core.runnables import RunnableConfig

from itinerary.generation.errors import UpstreamEmptyError, UpstreamFailureError
from itinerary.generation.prompts.builders import build_itinerary_prompt
from itinerary.generation.schemas import GenerationState


logger = logging.getLogger(__name__)

TextGenerator = Callable[[str], Awaitable[str]]


async def generate_node(state: GenerationState, config: RunnableConfig) -> Dict[str, Any]:
    """
    Call the model with the itinerary prompt.

    Args:
        state: Current generation state with the trip request
        config: Run config; configurable["text_generator"] is the model call

    Returns:
        Dictionary with state updates including raw_text

    Raises:
        UpstreamFailureError: If the model call raised
        UpstreamEmptyError: If the model returned no text
    """
    session_id = state.get("session_id", "unknown")
    _log = f"[session={session_id}] [graph=generation] [node=generate] "
    request = state["request"]
    text_generator: TextGenerator = config["configurable"]["text_generator"]

    prompt = build_itinerary_prompt(request)
    logger.info(
        f"{_log}Calling LLM | destination={request.destination}, "
        f"days={request.number_of_days}, travelers={request.number_of_travelers}, "
        f"budget={request.budget}"
    )

    start_time = time.perf_counter()
    try:
        text = await text_generator(prompt)
    except Exception as e:
        logger.exception(f"{_log}LLM call failed: {e}")
        raise UpstreamFailureError(f"AI Error: {e}") from e
    duration_ms = (time.perf_counter() - start_time) * 1000

    if not text or not text.strip():
        logger.error(f"{_log}Empty response | duration={duration_ms:.0f}ms")
        raise UpstreamEmptyError("Empty response received from AI")

    logger.info(f"{_log}LLM responded | duration={duration_ms:.0f}ms, chars={len(text)}")

    return {
        "prompt": prompt,
        "raw_text": text,
        "messages": [
            {
                "role": "system",
                "agent": "generate",
                "content": f"Received {len(text)} characters from the model",
            }
        ],
    }
