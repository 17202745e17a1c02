"""Allocate memory in fixed chunks, reporting the running total."""

from __future__ import annotations

import sys
from typing import Sequence

_CHUNK_SIZE = 10485760
_KB_IN_MB = 1024
_ROUNDS = 10


def main(argv: Sequence[str] | None = None) -> int:
    """Grow a buffer by ten 10 MiB chunks, printing its size after each one."""
    buf = bytearray()
    for _ in range(_ROUNDS):
        buf += bytes(_CHUNK_SIZE)
        sys.stdout.write(f"ate {len(buf) // _KB_IN_MB} MB \n")
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())