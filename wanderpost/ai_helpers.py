# ╔════════════════════════════════════════════════════════════════════════════╗
# ║                                AI HELPERS                                  ║
# ║ Generates travel-blog post ideas and header images with Gemini / Imagen.   ║
# ║ Every public call resolves to a string: backend output or a fallback.      ║
# ╚════════════════════════════════════════════════════════════════════════════╝

# Standard library imports
import asyncio
import base64
import logging
import re
from dataclasses import dataclass
from typing import Any, Callable, Optional, Union

# Third-party imports
from google import genai
from google.genai import types

# Local application imports
from wanderpost.environ import IMAGE_MODEL_ID, TEXT_MODEL_ID, get_api_key
from wanderpost.error_handling import (
    EmptyResultError,
    FallbackReason,
    Outcome,
    with_async_fallback,
)

# ╔════════════════════════════════════════════════════════════════════════════╗
# ║ CONFIGURATION AND GLOBALS                                                  ║
# ╚════════════════════════════════════════════════════════════════════════════╝

logger = logging.getLogger("wanderpost")

IDEA_PROMPT_TEMPLATE = (
    'Generate a short, engaging travel blog post idea about "{topic}". '
    "Make it sound like a personal anecdote or a helpful tip. "
    "Focus on a single paragraph."
)
IMAGE_PROMPT_TEMPLATE = (
    "A beautiful, vibrant, high-quality photograph of {prompt}. "
    "Travel photography style, cinematic lighting."
)

MISSING_KEY_MESSAGE = "API Key not configured. Please set up your API_KEY."
IDEA_ERROR_MESSAGE = "Could not generate an idea at this time. Please try again later."

FALLBACK_IMAGE_URL_TEMPLATE = "https://picsum.photos/seed/{seed}/1200/675"
IMAGE_MIME_TYPE = "image/jpeg"
IMAGE_ASPECT_RATIO = "16:9"

_WHITESPACE = re.compile(r"\s")

# ╔════════════════════════════════════════════════════════════════════════════╗
# ║ CLIENT CONTEXT                                                             ║
# ╚════════════════════════════════════════════════════════════════════════════╝

class GenAIContext:
    """
    Owns everything the generators need to reach the backend: where the
    credential comes from, how the client is built, which models to call,
    and the memoized client handle.

    The handle is built on the first `get_client()` call and reused for the
    lifetime of the context. With no credential, `get_client()` returns None
    and logs a warning on each attempt.
    """

    def __init__(self, api_key: Optional[str] = None,
                 client_factory: Optional[Callable[..., Any]] = None,
                 text_model: Optional[str] = None,
                 image_model: Optional[str] = None):
        self._api_key = api_key
        self._client_factory = client_factory
        self.text_model = text_model or TEXT_MODEL_ID
        self.image_model = image_model or IMAGE_MODEL_ID
        self._client: Optional[Any] = None

    @property
    def has_client(self) -> bool:
        return self._client is not None

    def get_client(self) -> Optional[Any]:
        if self._client is not None:
            return self._client

        api_key = self._api_key or get_api_key()
        if not api_key:
            logger.warning("API_KEY is not available in this environment. Gemini features will be disabled.")
            return None

        factory = self._client_factory or genai.Client
        self._client = factory(api_key=api_key)
        logger.info("Gemini client initialized")
        return self._client


_default_context: Optional[GenAIContext] = None

# --- get_default_context ---
# Returns the process-wide context, creating it on first use.
def get_default_context() -> GenAIContext:
    global _default_context
    if _default_context is None:
        _default_context = GenAIContext()
    return _default_context

# --- get_ai_client ---
# Returns the memoized client of the default context, or None when no
# credential is configured.
def get_ai_client() -> Optional[Any]:
    return get_default_context().get_client()

# ╔════════════════════════════════════════════════════════════════════════════╗
# ║ POST IDEA GENERATION                                                       ║
# ╚════════════════════════════════════════════════════════════════════════════╝

async def _request_post_idea(context: GenAIContext, topic: str) -> Outcome:
    client = context.get_client()
    if client is None:
        return Outcome.fallback(MISSING_KEY_MESSAGE, FallbackReason.MISSING_CREDENTIAL)

    logger.debug(f"Requesting post idea for topic: '{topic}'")
    response = await client.aio.models.generate_content(
        model=context.text_model,
        contents=IDEA_PROMPT_TEMPLATE.format(topic=topic),
    )
    text = response.text
    if not text or not text.strip():
        raise EmptyResultError("Model returned an empty idea")
    return Outcome.success(text)

# --- generate_post_idea_outcome ---
# Generates a single-paragraph travel post idea for the topic.
# Args:
#     topic: What the post should be about (e.g. "Kyoto in autumn").
#     context: Client context to use; defaults to the process-wide one.
# Returns: An Outcome whose value is the idea or a fixed fallback message.
async def generate_post_idea_outcome(topic: str, context: Optional[GenAIContext] = None) -> Outcome:
    return await with_async_fallback(
        _request_post_idea,
        context or get_default_context(),
        topic,
        fallback_value=IDEA_ERROR_MESSAGE,
        error_message="Error generating post idea",
    )

# --- generate_post_idea ---
# Public entry point. Never raises; always resolves to a non-empty string.
async def generate_post_idea(topic: str, context: Optional[GenAIContext] = None) -> str:
    outcome = await generate_post_idea_outcome(topic, context)
    return outcome.value

# ╔════════════════════════════════════════════════════════════════════════════╗
# ║ IMAGE GENERATION                                                           ║
# ╚════════════════════════════════════════════════════════════════════════════╝

# --- fallback_image_url ---
# Deterministic placeholder for a prompt: whitespace is stripped and the rest
# is used as the picsum seed, so the same prompt always maps to the same image.
def fallback_image_url(prompt: str) -> str:
    return FALLBACK_IMAGE_URL_TEMPLATE.format(seed=_WHITESPACE.sub("", prompt))


def _to_data_uri(image_bytes: Union[bytes, str]) -> str:
    # The SDK hands back raw bytes; a str payload is assumed to be base64 already.
    if isinstance(image_bytes, (bytes, bytearray)):
        payload = base64.b64encode(image_bytes).decode("ascii")
    else:
        payload = image_bytes
    return f"data:{IMAGE_MIME_TYPE};base64,{payload}"


async def _request_post_image(context: GenAIContext, prompt: str) -> Outcome:
    client = context.get_client()
    if client is None:
        return Outcome.fallback(fallback_image_url(prompt), FallbackReason.MISSING_CREDENTIAL)

    logger.debug(f"Requesting image for prompt: '{prompt}'")
    response = await client.aio.models.generate_images(
        model=context.image_model,
        prompt=IMAGE_PROMPT_TEMPLATE.format(prompt=prompt),
        config=types.GenerateImagesConfig(
            number_of_images=1,
            output_mime_type=IMAGE_MIME_TYPE,
            aspect_ratio=IMAGE_ASPECT_RATIO,
        ),
    )

    generated = response.generated_images or []
    if not generated:
        raise EmptyResultError("No image generated")
    image = generated[0].image
    if image is None or not image.image_bytes:
        raise EmptyResultError("Generated image has no payload")

    logger.info(f"Image generated for prompt: '{prompt}'")
    return Outcome.success(_to_data_uri(image.image_bytes))

# --- generate_post_image_outcome ---
# Generates a 16:9 JPEG header image for the prompt.
# Args:
#     prompt: Scene to photograph (usually the post topic).
#     context: Client context to use; defaults to the process-wide one.
# Returns: An Outcome whose value is a data URI or the placeholder URL.
async def generate_post_image_outcome(prompt: str, context: Optional[GenAIContext] = None) -> Outcome:
    return await with_async_fallback(
        _request_post_image,
        context or get_default_context(),
        prompt,
        fallback_value=fallback_image_url(prompt),
        error_message="Error generating image",
    )

# --- generate_post_image ---
# Public entry point. Never raises; resolves to a data URI or an HTTPS URL.
async def generate_post_image(prompt: str, context: Optional[GenAIContext] = None) -> str:
    outcome = await generate_post_image_outcome(prompt, context)
    return outcome.value

# ╔════════════════════════════════════════════════════════════════════════════╗
# ║ COMBINED ASSETS                                                            ║
# ╚════════════════════════════════════════════════════════════════════════════╝

@dataclass(frozen=True)
class PostAssets:
    idea: str
    image: str


async def generate_post_assets(topic: str, context: Optional[GenAIContext] = None,
                               image_prompt: Optional[str] = None) -> PostAssets:
    """Generate the idea and the image for one post concurrently."""
    context = context or get_default_context()
    idea, image = await asyncio.gather(
        generate_post_idea(topic, context),
        generate_post_image(image_prompt or topic, context),
    )
    return PostAssets(idea=idea, image=image)
