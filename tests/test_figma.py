import random
import re

import pytest

from optics_palette.color_utils import InvalidColorError
from optics_palette.figma import (
    color_token,
    figma_extensions,
    generate_variable_id,
    hex_to_figma_color,
    root_extensions,
)


def test_hex_to_figma_color():
    color = hex_to_figma_color("#3b82f6")
    assert color["colorSpace"] == "srgb"
    assert color["alpha"] == 1.0
    assert color["hex"] == "#3B82F6"
    assert color["components"] == pytest.approx([59 / 255, 130 / 255, 246 / 255])


def test_hex_to_figma_color_rejects_garbage():
    with pytest.raises(InvalidColorError):
        hex_to_figma_color("blue-ish")


def test_extensions_default_scope():
    ext = figma_extensions("VariableID:abc")
    assert ext == {"com.figma.variableId": "VariableID:abc", "com.figma.scopes": ["ALL_SCOPES"]}


def test_extensions_with_code_syntax():
    ext = figma_extensions("x", scopes=["FRAME_FILL"], web_value="var(--x)")
    assert ext["com.figma.scopes"] == ["FRAME_FILL"]
    assert ext["com.figma.codeSyntax"] == {"WEB": "var(--x)"}


def test_color_token():
    token = color_token("#ffffff", "id-1", web_value="var(--white)")
    assert token["$type"] == "color"
    assert token["$value"]["components"] == [1.0, 1.0, 1.0]
    assert token["$extensions"]["com.figma.variableId"] == "id-1"


def test_variable_id_format():
    assert re.fullmatch(r"VariableID:[a-z0-9]{13}", generate_variable_id())


def test_variable_id_is_reproducible_with_seeded_rng():
    assert generate_variable_id(random.Random(7)) == generate_variable_id(random.Random(7))


def test_root_extensions():
    assert root_extensions("Dark") == {"$extensions": {"com.figma.modeName": "Dark"}}
