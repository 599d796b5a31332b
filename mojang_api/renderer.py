"""
Player head rendering from a skin texture.

Skins are 64x64 (or legacy 64x32) PNGs; the face is the 8x8 square at
(8, 8) and the hat layer the 8x8 square at (40, 8).
"""

import base64
import io

from PIL import Image, UnidentifiedImageError

from mojang_api.exceptions.api_errors import IllegalArgumentError
from mojang_api.exceptions.mojang_exceptions import MojangSchemaError

FACE_BOX = (8, 8, 16, 16)
HAT_BOX = (40, 8, 48, 16)

OUTPUT_PNG = "png"
OUTPUT_BASE64 = "base64"
OUTPUT_DATA_URI = "data-uri"
OUTPUTS = (OUTPUT_PNG, OUTPUT_BASE64, OUTPUT_DATA_URI)

DATA_URI_PREFIX = b"data:image/png;base64,"


def _load_skin(image_bytes: bytes) -> Image.Image:
    try:
        skin = Image.open(io.BytesIO(image_bytes))
        skin.load()
    except (UnidentifiedImageError, OSError) as e:
        raise MojangSchemaError(f"Skin texture is not a readable image: {e}") from e

    if skin.width < HAT_BOX[2] or skin.height < FACE_BOX[3]:
        raise MojangSchemaError(f"Skin texture too small: {skin.width}x{skin.height}")

    return skin.convert("RGBA")


def validate_render_args(size: int, output: str) -> None:
    if size < 1:
        raise IllegalArgumentError(f"Head size must be positive, got {size}")
    if output not in OUTPUTS:
        raise IllegalArgumentError(f"Unknown output {output!r}, expected one of {OUTPUTS}")


def render_head(
    image_bytes: bytes,
    size: int = 64,
    output: str = OUTPUT_DATA_URI,
    overlay: bool = False,
) -> bytes:
    """
    Render the front of a player's head as a `size` x `size` PNG.

    Args:
        image_bytes: Raw skin texture.
        size: Edge length of the rendered head in pixels.
        output: "png" for raw PNG bytes, "base64" for the encoded PNG,
            "data-uri" for a data:image/png;base64 URI.
        overlay: Also draw the hat layer on top of the face.

    Returns:
        The encoded head as bytes.
    """
    validate_render_args(size, output)

    skin = _load_skin(image_bytes)

    head = skin.crop(FACE_BOX)
    if overlay:
        head.alpha_composite(skin.crop(HAT_BOX))

    head = head.resize((size, size), Image.Resampling.NEAREST)

    buffer = io.BytesIO()
    head.save(buffer, format="PNG")
    png = buffer.getvalue()

    if output == OUTPUT_PNG:
        return png

    encoded = base64.b64encode(png)
    if output == OUTPUT_BASE64:
        return encoded
    return DATA_URI_PREFIX + encoded
