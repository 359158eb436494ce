# ╔════════════════════════════════════════════════════════════════════════════╗
# ║                       ENVIRONMENT CONFIGURATION                            ║
# ║    Centralized access and type conversion for environment variables.       ║
# ║       Includes helpers for boolean, integer, and string values.            ║
# ╚════════════════════════════════════════════════════════════════════════════╝

# Standard library imports
import os
from typing import Optional

# ╔════════════════════════════════════════════════════════════════════════════╗
# ║ HELPER FUNCTIONS                                                           ║
# ╚════════════════════════════════════════════════════════════════════════════╝

# --- get_bool_env ---
# Retrieves an environment variable and interprets it as a boolean.
# Considers '1', 'true', 'yes' (case-insensitive) as True.
# Args:
#     var_name: The name of the environment variable.
#     default: The default boolean value if the variable is not set.
# Returns: The boolean value of the environment variable or the default.
def get_bool_env(var_name: str, default: bool = False) -> bool:
    val = os.getenv(var_name, str(default)).lower()
    return val in ("1", "true", "yes")

# --- get_str_env ---
# Retrieves an environment variable as a string, or the default if unset.
def get_str_env(var_name: str, default: Optional[str] = "") -> Optional[str]:
    return os.getenv(var_name, default)

# --- get_api_key ---
# Reads the Gemini credential at call time so late-loaded environments
# (tests, notebooks, .env loaders) are honoured. The value is used as-is;
# only an empty or all-whitespace value counts as unset.
# Returns: The API key string, or None when no usable key is configured.
def get_api_key() -> Optional[str]:
    value = get_str_env(API_KEY_ENV_VAR, None)
    if value is None or not value.strip():
        return None
    return value

# ╔════════════════════════════════════════════════════════════════════════════╗
# ║ CORE CONFIGURATION VARIABLES                                               ║
# ╚════════════════════════════════════════════════════════════════════════════╝

# Name of the variable holding the Gemini API key
API_KEY_ENV_VAR: str = "API_KEY"

# Debug mode flag (controls verbose logging)
DEBUG: bool = get_bool_env("DEBUG", False)

# Preferred log directory; falls back to ./logs and the temp dir when unset
LOG_DIR: Optional[str] = get_str_env("LOG_DIR", None)

# ╔════════════════════════════════════════════════════════════════════════════╗
# ║ MODEL CONFIGURATION                                                        ║
# ╚════════════════════════════════════════════════════════════════════════════╝

# Text model used for post ideas
TEXT_MODEL_ID: str = get_str_env("GEMINI_TEXT_MODEL_ID", "gemini-2.5-flash")

# Image model used for post header images
IMAGE_MODEL_ID: str = get_str_env("GEMINI_IMAGE_MODEL_ID", "imagen-4.0-generate-001")
