"""
Environment loading for the PromptVEO client.

Loads ``.env`` once so ``PROMPTVEO_BACKEND_URL`` and friends are visible
to the config layer.
"""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

_env_loaded = False


def ensure_env_loaded(env_path: Optional[Path] = None) -> bool:
    """
    Ensure variables from ``.env`` are loaded.

    Args:
        env_path: File to load; defaults to ``.env`` in the working directory

    Returns:
        True if a file was loaded, False if already loaded or not found
    """
    global _env_loaded

    if _env_loaded:
        return False

    env_path = Path(env_path) if env_path else Path.cwd() / ".env"
    if not env_path.exists():
        return False

    # Existing process variables win over the file.
    load_dotenv(env_path, override=False)
    _env_loaded = True
    return True


def get_backend_url() -> Optional[str]:
    """Backend URL from the environment, if set."""
    ensure_env_loaded()
    value = os.getenv("PROMPTVEO_BACKEND_URL")
    return value.strip() if value and value.strip() else None
