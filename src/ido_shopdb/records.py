from __future__ import annotations

import os
import struct
from dataclasses import astuple, dataclass, fields
from pathlib import Path
from typing import BinaryIO
from warnings import warn

import pandas as pd
import pyarrow as pa
import pyarrow.parquet as pq

from ido_core.errors import RecordSizeMismatch, TruncatedInput
from ido_core.protocol import (
    SHOP_DB_MAGIC,
    SHOP_NAME_LEN,
    SHOP_OFF_CATEGORY,
    SHOP_OFF_NAME,
    SHOP_OFF_SET_ITEM_ID,
    SHOP_OFF_TYPE_FLAG,
    SHOP_OFF_TYPE_ID,
    SHOP_OFF_VALIDITY,
    SHOP_OFF_VARIANT_ID,
    SHOP_RECORD_LEN,
)


@dataclass(frozen=True)
class ShopItem:
    category: int
    item_type_id: int
    variant_id: int
    validity: int
    type_flag: int
    set_item_id: int
    name: str


COLUMNS = [f.name for f in fields(ShopItem)]

SCHEMA = pa.schema(
    [
        ("category", pa.uint16()),
        ("item_type_id", pa.uint16()),
        ("variant_id", pa.int16()),
        ("validity", pa.int16()),
        ("type_flag", pa.uint8()),
        ("set_item_id", pa.int32()),
        ("name", pa.string()),
    ]
)


def looks_like_shop_db(header: bytes) -> bool:
    return header.startswith(SHOP_DB_MAGIC)


def decode_name(buf: bytes) -> str:
    """UTF-16LE up to the first null code unit, whitespace-trimmed."""
    end = len(buf) - len(buf) % 2
    for i in range(0, end, 2):
        if buf[i] == 0 and buf[i + 1] == 0:
            end = i
            break
    return buf[:end].decode("utf-16-le", errors="replace").strip()


def _read_bytes(f: BinaryIO, offset: int, size: int) -> bytes:
    f.seek(offset)
    data = f.read(size)
    if len(data) != size:
        raise TruncatedInput(f"record field at offset {offset} is torn")
    return data


def _read_at(f: BinaryIO, offset: int, fmt: str) -> int:
    return struct.unpack(fmt, _read_bytes(f, offset, struct.calcsize(fmt)))[0]


def parse_shop_db(f: BinaryIO, length: int | None = None) -> list[ShopItem]:
    """Read every whole record. Fields are fetched by offset; padding is never read."""
    if length is None:
        length = f.seek(0, os.SEEK_END)

    if length % SHOP_RECORD_LEN != 0:
        warn(
            f"File size {length} is not a multiple of record size ({SHOP_RECORD_LEN})!",
            RecordSizeMismatch,
            stacklevel=2,
        )

    items: list[ShopItem] = []
    for i in range(length // SHOP_RECORD_LEN):
        base = i * SHOP_RECORD_LEN
        items.append(
            ShopItem(
                category=_read_at(f, base + SHOP_OFF_CATEGORY, "<H"),
                item_type_id=_read_at(f, base + SHOP_OFF_TYPE_ID, "<H"),
                variant_id=_read_at(f, base + SHOP_OFF_VARIANT_ID, "<h"),
                validity=_read_at(f, base + SHOP_OFF_VALIDITY, "<h"),
                type_flag=_read_at(f, base + SHOP_OFF_TYPE_FLAG, "<B"),
                set_item_id=_read_at(f, base + SHOP_OFF_SET_ITEM_ID, "<i"),
                name=decode_name(_read_bytes(f, base + SHOP_OFF_NAME, SHOP_NAME_LEN)),
            )
        )
    return items


def read_shop_db(path: Path) -> list[ShopItem]:
    with open(path, "rb") as f:
        return parse_shop_db(f)


def to_frame(items: list[ShopItem]) -> pd.DataFrame:
    return pd.DataFrame([astuple(item) for item in items], columns=COLUMNS)


def write_shop_db(items: list[ShopItem], out_path: Path) -> None:
    """CSV with a header row, or Parquet when the target ends in .parquet."""
    out_path = Path(out_path)
    df = to_frame(items)
    if out_path.suffix.lower() == ".parquet":
        table = pa.Table.from_pandas(df, schema=SCHEMA, preserve_index=False)
        pq.write_table(table, out_path)
    else:
        df.to_csv(out_path, index=False)
