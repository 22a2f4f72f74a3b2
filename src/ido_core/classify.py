from __future__ import annotations

from enum import Enum

from .protocol import FOOTER_TGA, MAGIC_BMP, MAGIC_DDS, MAGIC_PNG


class PayloadKind(Enum):
    DDS = ("dds", "DDS Texture")
    TGA = ("tga", "TGA Texture")
    BMP = ("bmp", "BMP Texture")
    PNG = ("png", "PNG Texture")
    TEXT = (None, "Legacy Text")

    def __init__(self, extension: str | None, label: str):
        self.extension = extension
        self.label = label

    @property
    def is_binary(self) -> bool:
        return self.extension is not None


def classify(data: bytes) -> PayloadKind:
    """Decide what a decompressed payload holds.

    Order matters: a DDS file that happens to end in the TGA footer is
    still DDS. Anything unrecognised is treated as legacy text.
    """
    if data.startswith(MAGIC_DDS):
        return PayloadKind.DDS
    if data.endswith(FOOTER_TGA):
        return PayloadKind.TGA
    if data.startswith(MAGIC_BMP):
        return PayloadKind.BMP
    if data.startswith(MAGIC_PNG):
        return PayloadKind.PNG
    return PayloadKind.TEXT
