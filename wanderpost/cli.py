"""
Wanderpost - Command-Line Entry Point

Generates a travel-blog post idea and a header image for a topic and prints
them. Falls back to placeholder content when no API key is configured.
"""

import argparse
import asyncio
import json
import sys

from wanderpost.ai_helpers import generate_post_assets, generate_post_idea
from wanderpost.config import log_startup_config
from wanderpost.log import setup_logging

DATA_URI_PREVIEW_CHARS = 60


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Generate travel blog post assets")
    parser.add_argument("topic", help="What the post should be about")
    parser.add_argument("--image-prompt", help="Scene for the header image (defaults to the topic)")
    parser.add_argument("--skip-image", action="store_true", help="Only generate the post idea")
    parser.add_argument("--json", action="store_true", help="Print the result as JSON")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def format_image(image: str) -> str:
    """Shorten data URIs so the console stays readable."""
    if image.startswith("data:") and len(image) > DATA_URI_PREVIEW_CHARS:
        return f"{image[:DATA_URI_PREVIEW_CHARS]}... ({len(image)} chars)"
    return image


async def run(args) -> dict:
    if args.skip_image:
        return {"idea": await generate_post_idea(args.topic), "image": None}
    assets = await generate_post_assets(args.topic, image_prompt=args.image_prompt)
    return {"idea": assets.idea, "image": assets.image}


def main(argv=None) -> int:
    """Main application entry point."""
    args = parse_args(argv)
    logger = setup_logging(debug=args.debug or None)
    log_startup_config()

    try:
        result = asyncio.run(run(args))
    except KeyboardInterrupt:
        logger.info("Generation cancelled by user")
        return 130
    except Exception as e:
        logger.exception(f"Fatal error generating post assets: {e}")
        return 1

    if args.json:
        print(json.dumps(result, ensure_ascii=False, indent=2))
    else:
        print(f"\n📝 Idea:\n{result['idea']}")
        if result["image"] is not None:
            print(f"\n🖼️  Image:\n{format_image(result['image'])}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
