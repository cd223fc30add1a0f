"""
figma.py
────────
Building blocks for the Figma Variables import format (Design Tokens flavour).
"""

from __future__ import annotations

import random
import string
from typing import Any, Callable, Dict, List, Optional

from .color_utils import RGBColor, hex_to_rgb

Token = Dict[str, Any]
IdFactory = Callable[[], str]

_ID_ALPHABET = string.ascii_lowercase + string.digits
_ID_LENGTH   = 13


def hex_to_figma_color(hex_color: str) -> Dict[str, Any]:
    """``#3b82f6`` → ``{colorSpace, components (0–1), alpha, hex}``."""
    rgb = hex_to_rgb(hex_color)
    return rgb_to_figma_color(rgb, hex_color.upper())


def rgb_to_figma_color(rgb: RGBColor, hex_color: str) -> Dict[str, Any]:
    return {
        "colorSpace": "srgb",
        "components": [rgb.r, rgb.g, rgb.b],
        "alpha":      1.0,
        "hex":        hex_color,
    }


def figma_extensions(
    variable_id: str,
    scopes: Optional[List[str]] = None,
    web_value: Optional[str] = None,
) -> Dict[str, Any]:
    extensions: Dict[str, Any] = {
        "com.figma.variableId": variable_id,
        "com.figma.scopes":     list(scopes) if scopes is not None else ["ALL_SCOPES"],
    }
    if web_value:
        extensions["com.figma.codeSyntax"] = {"WEB": web_value}
    return extensions


def color_token(hex_color: str, variable_id: str, web_value: Optional[str] = None) -> Token:
    """A complete ``$type: color`` token for *hex_color*."""
    return {
        "$type":       "color",
        "$value":      hex_to_figma_color(hex_color),
        "$extensions": figma_extensions(variable_id, web_value=web_value),
    }


def generate_variable_id(rng: Optional[random.Random] = None) -> str:
    """Random ``VariableID:<13 base-36 chars>`` identifier."""
    chooser = rng or random.SystemRandom()
    suffix = "".join(chooser.choice(_ID_ALPHABET) for _ in range(_ID_LENGTH))
    return f"VariableID:{suffix}"


def root_extensions(mode_name: str) -> Dict[str, Any]:
    return {"$extensions": {"com.figma.modeName": mode_name}}
