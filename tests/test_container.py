import zlib

import pytest

from ido_core.classify import PayloadKind
from ido_core.container import BinaryAsset, TextDocument, decode, encode, split_document
from ido_core.errors import (
    CorruptStream,
    LossyTranscode,
    MalformedHeader,
    MalformedHeaderMarker,
    MissingHeaderMarker,
    TruncatedInput,
)
from ido_core.protocol import FOOTER_TGA, HEADER_LEN

SEQ_HEADER = bytes(range(HEADER_LEN))
SEQ_HEX = SEQ_HEADER.hex()


def make_container(payload: bytes, header: bytes = SEQ_HEADER) -> bytes:
    return header + zlib.compress(payload)


def test_end_to_end_title_document():
    container = make_container(b"<title>Test</title>")

    doc = decode(container)
    assert isinstance(doc, TextDocument)
    assert not doc.had_loss

    rendered = doc.render()
    assert rendered == f"<title>Test</title>\n<!-- IDO HEADER: {SEQ_HEX} -->"
    assert rendered.endswith("\n<!-- IDO HEADER: 000102030405060708090a0b0c0d0e0f" + SEQ_HEX[32:] + " -->")

    assert encode(rendered) == container
    assert encode(doc) == container


def test_hangul_payload_survives_round_trip():
    payload = "<window>\n  <title>상점</title>\n</window>".encode("cp949")
    header = b"\xa5" * HEADER_LEN
    container = make_container(payload, header)

    rebuilt = encode(decode(container).render())
    assert rebuilt[:HEADER_LEN] == header
    assert zlib.decompress(rebuilt[HEADER_LEN:]) == payload


def test_edited_document_keeps_header():
    doc = decode(make_container(b"<title>Test</title>"))
    edited = doc.render().replace("Test", "Edited")

    rebuilt = encode(edited)
    assert rebuilt[:HEADER_LEN] == SEQ_HEADER
    assert zlib.decompress(rebuilt[HEADER_LEN:]) == b"<title>Edited</title>"


def test_last_marker_is_authoritative():
    decoy = "<!-- IDO HEADER: " + "ff" * HEADER_LEN + " -->"
    text = f"<a>{decoy}</a>\n<!-- IDO HEADER: {SEQ_HEX} -->"

    body, header = split_document(text)
    assert header == SEQ_HEADER
    assert body == f"<a>{decoy}</a>"


def test_body_is_trimmed():
    body, _ = split_document(f"\n\n  <a/>  \n\n<!-- IDO HEADER: {SEQ_HEX} -->\n")
    assert body == "<a/>"


def test_missing_marker():
    with pytest.raises(MissingHeaderMarker):
        encode("<title>Test</title>")


def test_unterminated_marker():
    with pytest.raises(MalformedHeaderMarker):
        encode(f"<title>Test</title>\n<!-- IDO HEADER: {SEQ_HEX}")


def test_bad_header_hex():
    with pytest.raises(MalformedHeader):
        encode("<title>Test</title>\n<!-- IDO HEADER: 0g -->")


def test_binary_payload_discards_header():
    png = b"\x89PNG\r\n\x1a\n" + bytes(32)
    asset = decode(make_container(png))
    assert isinstance(asset, BinaryAsset)
    assert asset.kind is PayloadKind.PNG
    assert asset.extension == "png"
    assert asset.data == png


def test_binary_priority_through_container():
    asset = decode(make_container(b"DDS " + bytes(16) + FOOTER_TGA))
    assert asset.kind is PayloadKind.DDS


def test_binary_asset_has_no_encode_path():
    asset = BinaryAsset(b"BM", PayloadKind.BMP)
    with pytest.raises(TypeError):
        encode(asset)


def test_truncated_container():
    with pytest.raises(TruncatedInput):
        decode(SEQ_HEADER[:50])


def test_corrupt_payload():
    with pytest.raises(CorruptStream):
        decode(SEQ_HEADER + b"\x00\x01garbage")
    with pytest.raises(CorruptStream):
        decode(SEQ_HEADER)


def test_lossy_decode_warns_but_succeeds():
    with pytest.warns(LossyTranscode):
        doc = decode(make_container(b"<a>\xff</a>"))
    assert doc.had_loss
    assert doc.render().endswith(f"<!-- IDO HEADER: {SEQ_HEX} -->")


def test_lossy_encode_warns_but_succeeds():
    with pytest.warns(LossyTranscode):
        container = encode(f"<a>\U0001F600</a>\n<!-- IDO HEADER: {SEQ_HEX} -->")
    assert zlib.decompress(container[HEADER_LEN:]) == b"<a>&#128512;</a>"
