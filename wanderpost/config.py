"""
Configuration summary for Wanderpost.

Collects the active settings into a dict and logs them at startup. The
credential itself is only ever reported as set or unset.
"""

from typing import Any, Dict, List

from wanderpost.environ import API_KEY_ENV_VAR, DEBUG, IMAGE_MODEL_ID, TEXT_MODEL_ID, get_api_key
from wanderpost.log import get_log_file_location, logger

# ╔════════════════════════════════════════════════════════════════════╗
# ║ 📋 Configuration Validation                                        ║
# ╚════════════════════════════════════════════════════════════════════╝

def validate_optional_config() -> List[str]:
    """Validate optional configuration and return warnings."""
    warnings = []

    if not get_api_key():
        warnings.append(f"{API_KEY_ENV_VAR} not set - AI generation disabled, placeholders will be used")

    return warnings

def get_config_summary() -> Dict[str, Any]:
    """Get a summary of current configuration."""
    return {
        "debug_mode": DEBUG,
        "api_key_set": bool(get_api_key()),
        "text_model": TEXT_MODEL_ID,
        "image_model": IMAGE_MODEL_ID,
        "log_file": get_log_file_location(),
    }

def log_startup_config():
    """Log configuration summary at startup."""
    logger.info("=" * 50)
    logger.info("🔧 Configuration Summary")
    logger.info("=" * 50)

    config = get_config_summary()
    logger.info(f"Debug Mode: {config['debug_mode']}")
    logger.info(f"API Key: {'✅' if config['api_key_set'] else '❌'}")
    logger.info(f"Text Model: {config['text_model']}")
    logger.info(f"Image Model: {config['image_model']}")
    logger.info(f"Log File: {config['log_file']}")

    warnings = validate_optional_config()
    if warnings:
        logger.warning("Configuration warnings:")
        for warning in warnings:
            logger.warning(f"  - {warning}")

    logger.info("=" * 50)
