"""
Configuration loader
"""
import logging
import os
from pathlib import Path

import yaml

from peer_eval.models import Settings


logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "config/settings.yaml"


def load_settings(config_path: str = None) -> Settings:
    """
    Load server settings from YAML file

    Args:
        config_path: Path to config file (default: $PEER_EVAL_CONFIG or
            config/settings.yaml)

    Returns:
        Settings object. Defaults are used when the file does not exist.
        STREAM_API_KEY / STREAM_API_SECRET environment variables override the
        file.
    """
    path = Path(config_path or os.getenv("PEER_EVAL_CONFIG", DEFAULT_CONFIG_PATH))

    data = {}
    if path.exists():
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}
    else:
        logger.warning(f"⚠️ Config file not found: {path}, using defaults")

    if os.getenv("STREAM_API_KEY"):
        data["stream_api_key"] = os.environ["STREAM_API_KEY"]
    if os.getenv("STREAM_API_SECRET"):
        data["stream_api_secret"] = os.environ["STREAM_API_SECRET"]

    return Settings(**data)
