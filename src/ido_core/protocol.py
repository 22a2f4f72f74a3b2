"""IDO protocol constants.

Single source of truth for on-disk sizes, magic values and record layouts.
Keep this file stable. Decoder and encoder must remain synchronized.
"""

# Container: [Header(95) | zlib payload]
HEADER_LEN = 0x5F

# Text intermediate: header appended as a trailing comment
HEADER_MARKER = "<!-- IDO HEADER: "
HEADER_MARKER_END = " -->"

# Legacy payload text encoding (UHC, the superset behind the "EUC-KR" label)
LEGACY_ENCODING = "cp949"

# Payload magics, checked in this order after decompression
MAGIC_DDS = b"DDS "                      # leading
FOOTER_TGA = b"TRUEVISION-XFILE.\x00"    # trailing
MAGIC_BMP = b"BM"                        # leading
MAGIC_PNG = b"\x89PNG"                   # leading

# Shop database: headerless array of fixed-size records
SHOP_DB_MAGIC = b"\x01\x00\x01\x00"
SHOP_RECORD_LEN = 456

# Field offsets within a shop record (all little-endian)
SHOP_OFF_CATEGORY = 0x00      # u16
SHOP_OFF_TYPE_ID = 0x02       # u16
SHOP_OFF_VARIANT_ID = 0x04    # i16
SHOP_OFF_VALIDITY = 0x06      # i16
SHOP_OFF_TYPE_FLAG = 0x0C     # u8
SHOP_OFF_SET_ITEM_ID = 0x38   # i32
SHOP_OFF_NAME = 0x64          # UTF-16LE, null-terminated
SHOP_NAME_LEN = 100
