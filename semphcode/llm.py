"""
LLM module for handling DeepSeek model interactions behind the relay
"""

from typing import AsyncIterator, Dict, List, Optional

import openai

import config
from semphcode.prompt import prompt, chat_prompt, DEFAULT_HTML
from semphcode.normalizer import DOCUMENT_END
from semphcode.logger import get_logger

logger = get_logger(__name__)

# DeepSeek speaks the OpenAI chat completions protocol
deepseek_client = (
    openai.AsyncOpenAI(
        base_url=config.DEEPSEEK_BASE_URL,
        api_key=config.DEEPSEEK_API_KEY,
    )
    if config.DEEPSEEK_API_KEY
    else None
)


def build_messages(
    user_prompt: str, html: Optional[str] = None, previous_prompt: Optional[str] = None
) -> List[Dict[str, str]]:
    """Build the chat messages for a generation request"""
    full_prompt = user_prompt
    if previous_prompt:
        full_prompt = f"{previous_prompt}\n\n{user_prompt}"

    messages = [{"role": "system", "content": prompt}]

    # The starter page carries no information for the model
    if html and html != DEFAULT_HTML:
        messages.append({"role": "assistant", "content": f"The current code is: {html}."})

    messages.append({"role": "user", "content": full_prompt})
    return messages


async def open_stream(messages: List[Dict[str, str]]):
    """Start a streamed completion. Raises openai.APIStatusError before any text is sent."""
    logger.info(
        f"Calling DeepSeek API with model: {config.DEEPSEEK_MODEL}, {len(messages)} messages"
    )
    return await deepseek_client.chat.completions.create(
        model=config.DEEPSEEK_MODEL,
        messages=messages,
        stream=True,
        max_tokens=config.DEEPSEEK_MAX_TOKENS,
    )


async def iter_html(stream) -> AsyncIterator[str]:
    """Yield content deltas until the page is closed with </html>"""
    complete_response = ""
    try:
        async for event in stream:
            if not event.choices:
                continue
            content = event.choices[0].delta.content or ""
            if not content:
                continue

            complete_response += content
            yield content

            # A closed page is all we need, the model may keep talking after it
            if DOCUMENT_END in complete_response:
                logger.info(
                    f"Complete document received after {len(complete_response)} chars"
                )
                break
    except openai.OpenAIError as e:
        # Headers are already sent, so the client just sees the stream end
        logger.error(f"Error while streaming from DeepSeek: {str(e)}", exc_info=True)
    finally:
        await stream.close()


async def complete_chat(user_prompt: str, context: Optional[str] = None) -> str:
    """Answer a programming question without streaming"""
    messages = [
        {"role": "system", "content": context or chat_prompt},
        {"role": "user", "content": user_prompt},
    ]

    logger.info(f"Calling DeepSeek chat with model: {config.DEEPSEEK_MODEL}")
    response = await deepseek_client.chat.completions.create(
        model=config.DEEPSEEK_MODEL,
        messages=messages,
        max_tokens=config.CHAT_MAX_TOKENS,
    )

    if not response.choices or not response.choices[0].message.content:
        return "I couldn't process your question."
    return response.choices[0].message.content
