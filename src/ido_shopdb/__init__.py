"""IDO Shop DB - fixed-width item record parser."""
from .records import (
    COLUMNS,
    ShopItem,
    decode_name,
    looks_like_shop_db,
    parse_shop_db,
    read_shop_db,
    to_frame,
    write_shop_db,
)

__all__ = [
    "COLUMNS",
    "ShopItem",
    "decode_name",
    "looks_like_shop_db",
    "parse_shop_db",
    "read_shop_db",
    "to_frame",
    "write_shop_db",
]
