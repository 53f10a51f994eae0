"""Low-level terminal input decoding.

Reads raw bytes from stdin and translates them into normalized key tokens.
Handles ESC-sequence timing, Alt combos, CSI/SS3 named keys, control keys,
and multi-byte UTF-8 characters.
"""

from __future__ import annotations

import os
import select

ESC_SEQUENCE_TIMEOUT_MS = 25
# Returned for escape sequences with no name; nothing binds it.
UNKNOWN_KEY = "UNKNOWN"

_CONTROL_KEYS: dict[bytes, str] = {
    b"\x03": "CTRL_C",
    b"\x04": "CTRL_D",
    b"\t": "TAB",
    b"\x08": "BACKSPACE",
    b"\x7f": "BACKSPACE",
    b"\r": "ENTER",
    b"\n": "ENTER",
}

_FINAL_KEYS: dict[bytes, str] = {
    b"A": "UP",
    b"B": "DOWN",
    b"C": "RIGHT",
    b"D": "LEFT",
    b"H": "HOME",
    b"F": "END",
    b"P": "F1",
    b"Q": "F2",
    b"R": "F3",
    b"S": "F4",
    b"Z": "SHIFT_TAB",
}

_TILDE_KEYS: dict[str, str] = {
    "1": "HOME",
    "2": "INSERT",
    "3": "DELETE",
    "4": "END",
    "5": "PGUP",
    "6": "PGDOWN",
    "7": "HOME",
    "8": "END",
    "11": "F1",
    "12": "F2",
    "13": "F3",
    "14": "F4",
    "15": "F5",
    "17": "F6",
    "18": "F7",
    "19": "F8",
    "20": "F9",
    "21": "F10",
    "23": "F11",
    "24": "F12",
}

# xterm modifier parameter minus one is a bitmask: 1 shift, 2 alt, 4 ctrl.
_MODIFIER_PREFIXES: tuple[tuple[int, str], ...] = ((4, "CTRL_"), (2, "ALT_"), (1, "SHIFT_"))


def _read_ready_byte(fd: int, timeout_ms: int) -> bytes | None:
    ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
    if not ready:
        return None
    ch = os.read(fd, 1)
    if not ch:
        return None
    return ch


def _utf8_length(lead: int) -> int:
    if lead >= 0xF0:
        return 4
    if lead >= 0xE0:
        return 3
    if lead >= 0xC0:
        return 2
    return 1


def _decode_char(fd: int, first: bytes, timeout_ms: int) -> str:
    data = first
    for _ in range(_utf8_length(first[0]) - 1):
        nxt = _read_ready_byte(fd, timeout_ms)
        if nxt is None:
            break
        data += nxt
    return data.decode("utf-8", errors="replace")


def _modifier_prefix(param: str) -> str:
    try:
        mask = int(param) - 1
    except ValueError:
        return ""
    return "".join(prefix for bit, prefix in _MODIFIER_PREFIXES if mask & bit)


def _decode_sequence(params: str, final: bytes) -> str:
    """Name a CSI/SS3 sequence from its parameter bytes and final byte."""
    fields = params.split(";")
    prefix = _modifier_prefix(fields[1]) if len(fields) > 1 else ""
    if final == b"~":
        name = _TILDE_KEYS.get(fields[0])
    else:
        name = _FINAL_KEYS.get(final)
    if name is None:
        return UNKNOWN_KEY
    return prefix + name


def read_key(
    fd: int,
    timeout_ms: int | None = None,
    esc_timeout_ms: int = ESC_SEQUENCE_TIMEOUT_MS,
) -> str:
    """Read one key token from ``fd``.

    Returns ``""`` when ``timeout_ms`` elapses with no input or the stream is
    at EOF. ``"ESC"`` is only produced by an escape byte with nothing after it
    within ``esc_timeout_ms``; ``ESC`` followed by a byte is an Alt combo
    (``"ALT_y"``) and unnamed sequences decode to ``UNKNOWN_KEY``.
    """
    if timeout_ms is not None:
        ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
        if not ready:
            return ""

    ch = os.read(fd, 1)
    if not ch:
        return ""

    control = _CONTROL_KEYS.get(ch)
    if control is not None:
        return control

    if ch != b"\x1b":
        return _decode_char(fd, ch, esc_timeout_ms)

    seq = _read_ready_byte(fd, esc_timeout_ms)
    if seq is None:
        return "ESC"
    if seq == b"\x1b":
        return "ALT_ESC"
    if seq not in {b"[", b"O"}:
        control = _CONTROL_KEYS.get(seq)
        if control is not None:
            return f"ALT_{control}"
        return "ALT_" + _decode_char(fd, seq, esc_timeout_ms)

    introducer = seq
    params: list[bytes] = []
    while True:
        part = _read_ready_byte(fd, esc_timeout_ms)
        if part is None:
            # ESC [ or ESC O with nothing usable after it.
            return f"ALT_{introducer.decode('ascii')}" if not params else UNKNOWN_KEY
        if b"@" <= part <= b"~" and not (introducer == b"[" and part == b"[" and not params):
            break
        params.append(part)
        if len(params) > 16:
            return UNKNOWN_KEY
    return _decode_sequence(b"".join(params).decode("ascii", errors="replace"), part)
