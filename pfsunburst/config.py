import os
import logging

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

# Load .env from project root (or wherever the user placed it)
load_dotenv()

COLOR_POLICIES = ("group", "depth")
IDENTITY_MODES = ("path", "label")


def _get_int(name: str, default: int, minimum: int = 1) -> int:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise EnvironmentError(f"{name} must be an integer, got {raw!r}.")
    if value < minimum:
        raise EnvironmentError(f"{name} must be at least {minimum}, got {value}.")
    return value


def _get_choice(name: str, default: str, choices) -> str:
    value = os.environ.get(name, default).strip().lower() or default
    if value not in choices:
        raise EnvironmentError(
            f"{name} must be one of {list(choices)}, got {value!r}."
        )
    return value


def get_wrap_width() -> int:
    return _get_int("PFSUNBURST_WRAP_WIDTH", 25)


def get_color_policy_name() -> str:
    return _get_choice("PFSUNBURST_COLOR_POLICY", "group", COLOR_POLICIES)


def get_identity_mode() -> str:
    return _get_choice("PFSUNBURST_IDENTITY", "path", IDENTITY_MODES)


def get_server_port() -> int:
    return _get_int("PFSUNBURST_PORT", 5000)
