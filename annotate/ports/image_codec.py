from __future__ import annotations
from pathlib import Path
from typing import Protocol

from PIL import Image

class ImageCodec(Protocol):
    def load(self, path: Path) -> Image.Image: ...
    def save(self, image: Image.Image, path: Path) -> None: ...
