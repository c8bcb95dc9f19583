import io
import logging
import os
from typing import Union

import numpy as np
from PIL import Image, UnidentifiedImageError

from ascii_art.render.ascii import SourceImage
from ascii_art.render.errors import ImageDecodeError

logger = logging.getLogger(__name__)

ImageSource = Union[str, os.PathLike, bytes, Image.Image]

OPEN_FILTER = "Images (*.png *.jpg *.jpeg *.bmp *.gif *.webp *.tiff);;All Files (*.*)"


def source_from_pil(img: Image.Image) -> SourceImage:
    rgba = img.convert("RGBA")
    w, h = rgba.size
    return SourceImage(w, h, np.asarray(rgba, dtype=np.uint8))


def load_source_image(src: ImageSource) -> SourceImage:
    if isinstance(src, Image.Image):
        return source_from_pil(src)
    try:
        fp = io.BytesIO(src) if isinstance(src, (bytes, bytearray)) else src
        with Image.open(fp) as img:
            img.load()
            source = source_from_pil(img)
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as e:
        raise ImageDecodeError(f"Could not decode image: {e}") from e
    logger.info("decoded image %dx%d", source.width, source.height)
    return source
