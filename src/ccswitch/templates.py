"""Built-in profiles templates written by ``ccswitch init``.

Credential values are placeholders. ``mask_sensitive_value`` reports them
as "(not set)" until the user fills them in.
"""

import json
from typing import Any

from ccswitch.paths import DEFAULT_SETTINGS_PATH

_ANTHROPIC_PROFILE = {
    "ANTHROPIC_API_KEY": "sk-",
    "ANTHROPIC_BASE_URL": "https://api.anthropic.com",
    "ANTHROPIC_MODEL": "opus",
    "ANTHROPIC_DEFAULT_HAIKU_MODEL": "haiku",
    "ANTHROPIC_DEFAULT_OPUS_MODEL": "opus",
    "ANTHROPIC_DEFAULT_SONNET_MODEL": "sonnet",
    "ANTHROPIC_SMALL_FAST_MODEL": "haiku",
}

DEFAULT_TEMPLATE: dict[str, Any] = {
    "default": "default",
    "settingsPath": DEFAULT_SETTINGS_PATH,
    "profiles": {
        "default": dict(_ANTHROPIC_PROFILE),
    },
    "descriptions": {
        "default": "Anthropic official API",
    },
}

FULL_TEMPLATE: dict[str, Any] = {
    "default": "default",
    "settingsPath": DEFAULT_SETTINGS_PATH,
    "profiles": {
        "default": dict(_ANTHROPIC_PROFILE),
        "deepseek": {
            "ANTHROPIC_AUTH_TOKEN": "sk-",
            "ANTHROPIC_BASE_URL": "https://api.deepseek.com/anthropic",
            "ANTHROPIC_MODEL": "deepseek-chat",
            "ANTHROPIC_SMALL_FAST_MODEL": "deepseek-chat",
        },
        "kimi": {
            "ANTHROPIC_AUTH_TOKEN": "sk-kimi-",
            "ANTHROPIC_BASE_URL": "https://api.kimi.com/coding/",
            "ANTHROPIC_MODEL": "kimi-for-coding",
        },
        "glm": {
            "ANTHROPIC_AUTH_TOKEN": "",
            "ANTHROPIC_BASE_URL": "https://open.bigmodel.cn/api/anthropic",
            "ANTHROPIC_MODEL": "glm-4.6",
            "ANTHROPIC_SMALL_FAST_MODEL": "glm-4.5-air",
        },
        "modelscope": {
            "ANTHROPIC_AUTH_TOKEN": "ms-",
            "ANTHROPIC_BASE_URL": "https://api-inference.modelscope.cn",
            "ANTHROPIC_MODEL": "Qwen/Qwen3-Coder-480B-A35B-Instruct",
        },
    },
    "descriptions": {
        "default": "Anthropic official API",
        "deepseek": "DeepSeek Anthropic-compatible API",
        "kimi": "Kimi for Coding",
        "glm": "Zhipu GLM coding plan",
        "modelscope": "ModelScope API inference",
    },
}


def render_template(full: bool = False) -> str:
    """Return the JSON text for a new profiles file."""
    template = FULL_TEMPLATE if full else DEFAULT_TEMPLATE
    return json.dumps(template, indent=4, ensure_ascii=False) + "\n"


__all__ = ["DEFAULT_TEMPLATE", "FULL_TEMPLATE", "render_template"]
