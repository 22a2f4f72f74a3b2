import sys
from pathlib import Path

from ido_core.protocol import HEADER_LEN


def main():
    if len(sys.argv) != 2:
        print("Usage: corrupt_one_byte.py <file.ido>")
        raise SystemExit(2)

    p = Path(sys.argv[1])
    b = bytearray(p.read_bytes())
    if len(b) < HEADER_LEN + 8:
        print("File too small to corrupt safely.")
        raise SystemExit(2)

    # Header is opaque and never validated, so flip a byte inside the
    # zlib stream instead. Byte 1 of the stream is the FLG check byte.
    idx = HEADER_LEN + 1
    b[idx] ^= 0x01
    p.write_bytes(bytes(b))
    print(f"Corrupted 1 byte at offset {idx} in {p}")

if __name__ == "__main__":
    main()
