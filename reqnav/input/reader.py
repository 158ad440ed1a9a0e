"""Low-level terminal input decoding.

Reads raw bytes from a tty file descriptor and translates them into the key
tokens understood by ``KeyPress``. Handles ESC-sequence timing for arrows,
Home/End and Delete, including their modifier-carrying CSI forms.
"""

from __future__ import annotations

import os
import select
from collections import deque

ESC_SEQUENCE_TIMEOUT_MS = 25
_PENDING_BYTES: deque[bytes] = deque()

_CONTROL_BYTES: dict[bytes, str] = {
    b"\x03": "CTRL_C",
    b"\t": "TAB",
    b"\x08": "BACKSPACE",
    b"\x7f": "BACKSPACE",
    b"\x15": "CTRL_U",
    b"\r": "ENTER",
    b"\n": "ENTER",
}
_CSI_FINAL: dict[bytes, str] = {
    b"A": "UP",
    b"B": "DOWN",
    b"C": "RIGHT",
    b"D": "LEFT",
    b"H": "HOME",
    b"F": "END",
}
_CSI_TILDE: dict[bytes, str] = {
    b"1": "HOME",
    b"7": "HOME",
    b"3": "DELETE",
    b"4": "END",
    b"8": "END",
}


def _read_ready_byte(fd: int, timeout_ms: int) -> bytes | None:
    ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
    if not ready:
        return None
    ch = os.read(fd, 1)
    if not ch:
        return None
    return ch


def _read_utf8_tail(fd: int, first: bytes) -> str:
    """Complete a multi-byte UTF-8 character whose lead byte is ``first``."""
    lead = first[0]
    if lead >= 0xF0:
        needed = 3
    elif lead >= 0xE0:
        needed = 2
    elif lead >= 0xC0:
        needed = 1
    else:
        needed = 0
    data = first
    for _ in range(needed):
        more = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if more is None:
            break
        data += more
    return data.decode("utf-8", errors="replace")


def _decode_escape(fd: int) -> str:
    """Decode the bytes following ESC.

    CSI parameters such as the modifier in ``ESC[1;5A`` are consumed and
    dropped, so a modified arrow reads as the plain arrow. Complete sequences
    with no key mapping decode to ``""``.
    """
    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq is None:
        return "ESC"
    if seq not in {b"[", b"O"}:
        _PENDING_BYTES.append(seq)
        return "ESC"
    params = b""
    while True:
        byte = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if byte is None:
            return "ESC"
        if 0x20 <= byte[0] <= 0x3F:
            params += byte
            continue
        if 0x40 <= byte[0] <= 0x7E:
            break
        _PENDING_BYTES.append(byte)
        return "ESC"
    if byte == b"~":
        return _CSI_TILDE.get(params.split(b";")[0], "")
    return _CSI_FINAL.get(byte, "")


def read_key(fd: int, timeout_ms: int | None = None) -> str:
    """Read one key token from ``fd``.

    Returns ``""`` when ``timeout_ms`` elapses with no input, when the stream is
    at EOF, or when an escape sequence maps to no known key.
    """
    if _PENDING_BYTES:
        ch = _PENDING_BYTES.popleft()
    else:
        if timeout_ms is not None:
            ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
            if not ready:
                return ""
        ch = os.read(fd, 1)
        if not ch:
            return ""

    named = _CONTROL_BYTES.get(ch)
    if named is not None:
        return named
    if ch == b"\x1b":
        return _decode_escape(fd)
    if ch[0] >= 0x80:
        return _read_utf8_tail(fd, ch)
    return ch.decode("utf-8", errors="replace")
