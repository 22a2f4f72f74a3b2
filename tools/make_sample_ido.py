import struct
import sys
from pathlib import Path

from ido_core.compression import compress
from ido_core.protocol import (
    HEADER_LEN,
    SHOP_NAME_LEN,
    SHOP_OFF_NAME,
    SHOP_OFF_SET_ITEM_ID,
    SHOP_OFF_TYPE_FLAG,
    SHOP_RECORD_LEN,
)
from ido_core.transcode import encode_legacy

# --- CONFIGURATION ---
# Sequential header so any byte drift is obvious in a hex dump
SAMPLE_HEADER = bytes(range(HEADER_LEN))

SAMPLE_LAYOUT = """<?xml version="1.0" encoding="euc-kr"?>
<window name="shop_main" x="12" y="40">
    <title>상점</title>
    <button id="buy">구입</button>
    <button id="sell">판매</button>
</window>"""

SAMPLE_ITEMS = [
    # category, type id, variant, validity, flag, set item, name
    (1, 1, 0, 1, 0, -1, "Wooden Sword"),
    (2, 17, 3, 30, 1, 1204, "  가죽 갑옷  "),
    (3, 256, -1, -1, 255, 0, "Potion"),
]


def make_text_container() -> bytes:
    raw, _ = encode_legacy(SAMPLE_LAYOUT)
    return SAMPLE_HEADER + compress(raw)


def make_texture_container() -> bytes:
    # Minimal DDS-looking payload: magic + zeroed 124-byte surface header
    dds = b"DDS " + struct.pack("<I", 124) + bytes(120) + bytes(range(64))
    return SAMPLE_HEADER + compress(dds)


def make_shop_record(category, type_id, variant, validity, flag, set_item, name) -> bytes:
    rec = bytearray(SHOP_RECORD_LEN)
    struct.pack_into("<HHhh", rec, 0, category, type_id, variant, validity)
    rec[SHOP_OFF_TYPE_FLAG] = flag
    struct.pack_into("<i", rec, SHOP_OFF_SET_ITEM_ID, set_item)
    encoded = name.encode("utf-16-le")[: SHOP_NAME_LEN - 2]
    rec[SHOP_OFF_NAME:SHOP_OFF_NAME + len(encoded)] = encoded
    return bytes(rec)


def make_shop_db(ragged: bool = False) -> bytes:
    blob = b"".join(make_shop_record(*item) for item in SAMPLE_ITEMS)
    if ragged:
        blob += b"\xff" * 10
    return blob


def generate_samples(out_dir) -> Path:
    out = Path(out_dir)
    out.mkdir(parents=True, exist_ok=True)
    (out / "layout.ido").write_bytes(make_text_container())
    (out / "texture.ido").write_bytes(make_texture_container())
    (out / "shop.ido").write_bytes(make_shop_db())
    (out / "shop_ragged.ido").write_bytes(make_shop_db(ragged=True))
    print(f"GENERATED: {out}")
    return out


if __name__ == "__main__":
    # Usage: python tools/make_sample_ido.py [OUT_DIR]
    generate_samples(sys.argv[1] if len(sys.argv) > 1 else "samples")
