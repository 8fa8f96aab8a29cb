import json
import os

from smart_home_sim.exceptions import ConfigurationError


def load_settings(filePath='settings.json'):
    if not os.path.isabs(filePath):
        base_dir = os.path.dirname(os.path.abspath(__file__))
        filePath = os.path.join(base_dir, filePath)
    try:
        with open(filePath, 'r', encoding='utf-8') as f:
            settings = json.load(f)
    except FileNotFoundError:
        raise ConfigurationError(f"Settings file not found: {filePath}") from None
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"Invalid settings file {filePath}: {exc}") from None
    if not isinstance(settings, dict):
        raise ConfigurationError(f"Settings file {filePath} must contain a JSON object")
    return settings
