# Wanderpost Package
"""
Wanderpost - AI helpers for a travel-blog content generator.

Generates post ideas with Gemini and header images with Imagen, falling back
to fixed messages and placeholder images whenever the backend is unavailable.
"""

__version__ = "1.0.0"

from .ai_helpers import (
    GenAIContext,
    PostAssets,
    fallback_image_url,
    generate_post_assets,
    generate_post_idea,
    generate_post_idea_outcome,
    generate_post_image,
    generate_post_image_outcome,
    get_ai_client,
)
from .error_handling import FallbackReason, Outcome

__all__ = [
    'GenAIContext', 'PostAssets', 'Outcome', 'FallbackReason',
    'generate_post_idea', 'generate_post_image', 'generate_post_assets',
    'generate_post_idea_outcome', 'generate_post_image_outcome',
    'fallback_image_url', 'get_ai_client',
]
