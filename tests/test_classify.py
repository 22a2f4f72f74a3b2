import pytest

from ido_core.classify import PayloadKind, classify
from ido_core.protocol import FOOTER_TGA


@pytest.mark.parametrize(
    "payload, kind",
    [
        (b"DDS \x7c\x00\x00\x00", PayloadKind.DDS),
        (b"\x00\x00\x02\x00" + bytes(20) + FOOTER_TGA, PayloadKind.TGA),
        (b"BM\x36\x00\x00\x00", PayloadKind.BMP),
        (b"\x89PNG\r\n\x1a\n", PayloadKind.PNG),
        (b"<window/>", PayloadKind.TEXT),
        (b"", PayloadKind.TEXT),
    ],
)
def test_classify(payload, kind):
    assert classify(payload) is kind


def test_dds_wins_over_tga_footer():
    assert classify(b"DDS " + bytes(8) + FOOTER_TGA) is PayloadKind.DDS


def test_tga_footer_wins_over_bmp_magic():
    assert classify(b"BM" + FOOTER_TGA) is PayloadKind.TGA


def test_extensions():
    assert [k.extension for k in PayloadKind if k.is_binary] == ["dds", "tga", "bmp", "png"]
    assert not PayloadKind.TEXT.is_binary
