from __future__ import annotations
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from annotate.errors import ImageLoadError, UnsupportedFormatError
from annotate.ports.image_codec import ImageCodec

FORMATS = {".png": "PNG", ".jpg": "JPEG", ".jpeg": "JPEG"}


def image_format(path: Path) -> str:
    """Pillow format name for ``path``, chosen by extension only."""
    ext = Path(path).suffix.lower()
    try:
        return FORMATS[ext]
    except KeyError:
        raise UnsupportedFormatError(ext) from None


class PillowImageCodec(ImageCodec):
    def load(self, path: Path) -> Image.Image:
        fmt = image_format(path)
        try:
            with Image.open(path, formats=[fmt]) as im:
                return im.copy()
        except (OSError, UnidentifiedImageError) as e:
            raise ImageLoadError(f"could not read {fmt} image {path}: {e}") from e

    def save(self, image: Image.Image, path: Path) -> None:
        fmt = image_format(path)
        if fmt == "JPEG" and image.mode != "RGB":
            image = image.convert("RGB")
        try:
            if fmt == "JPEG":
                image.save(path, format=fmt, quality=95)
            else:
                image.save(path, format=fmt)
        except OSError as e:
            raise ImageLoadError(f"could not write {path}: {e}") from e
