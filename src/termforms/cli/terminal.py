"""
Utilidades de terminal: limpiar pantalla y leer teclas.

``decode_key`` traduce la secuencia cruda de una tecla a un KeyEvent;
``get_key`` lee esa secuencia del teclado en modo raw.
"""

import os
import sys
from typing import Optional

from termforms.keys import Key, KeyEvent

_SEQUENCES = {
    "\t": KeyEvent(Key.TAB),
    "\x1b[Z": KeyEvent(Key.TAB, shift=True),
    "\r": KeyEvent(Key.ENTER),
    "\n": KeyEvent(Key.ENTER),
    "\x1b": KeyEvent(Key.ESC),
    " ": KeyEvent(Key.SPACE),
    "\x7f": KeyEvent(Key.BACKSPACE),
    "\x08": KeyEvent(Key.BACKSPACE),
    "\x1b[A": KeyEvent(Key.UP),
    "\x1b[B": KeyEvent(Key.DOWN),
    "\x1b[C": KeyEvent(Key.RIGHT),
    "\x1b[D": KeyEvent(Key.LEFT),
    "\x1b[H": KeyEvent(Key.HOME),
    "\x1b[F": KeyEvent(Key.END),
    "\x1bOH": KeyEvent(Key.HOME),
    "\x1bOF": KeyEvent(Key.END),
    "\x1b[1~": KeyEvent(Key.HOME),
    "\x1b[7~": KeyEvent(Key.HOME),
    "\x1b[4~": KeyEvent(Key.END),
    "\x1b[8~": KeyEvent(Key.END),
    "\x1b[3~": KeyEvent(Key.DELETE),
}

# Windows: segundo byte tras el prefijo '\x00' o '\xe0'
_WINDOWS_SPECIAL = {
    "H": "\x1b[A",
    "P": "\x1b[B",
    "M": "\x1b[C",
    "K": "\x1b[D",
    "G": "\x1b[H",
    "O": "\x1b[F",
    "S": "\x1b[3~",
    "\x0f": "\x1b[Z",
}


def decode_key(sequence: str) -> Optional[KeyEvent]:
    """
    Traduce una secuencia de teclado a KeyEvent.

    Returns:
        El evento, o None si la secuencia no se reconoce
    """
    if sequence in _SEQUENCES:
        return _SEQUENCES[sequence]

    if len(sequence) == 1:
        code = ord(sequence)
        # Ctrl+A .. Ctrl+Z
        if 1 <= code <= 26:
            return KeyEvent(chr(code + ord("a") - 1), ctrl=True)
        if sequence.isprintable():
            return KeyEvent(sequence)

    return None


def clear_screen() -> None:
    """Limpia la pantalla de la terminal."""
    os.system("cls" if os.name == "nt" else "clear")


def _read_windows() -> str:
    import msvcrt

    char = msvcrt.getwch()
    if char in ("\x00", "\xe0"):
        return _WINDOWS_SPECIAL.get(msvcrt.getwch(), "")
    return char


def _utf8_length(lead: int) -> int:
    """Cantidad de bytes de un caracter UTF-8 según su primer byte."""
    if lead >= 0xF0:
        return 4
    if lead >= 0xE0:
        return 3
    if lead >= 0xC0:
        return 2
    return 1


def _read_unix(fd: Optional[int] = None) -> str:
    import select
    import termios
    import tty

    if fd is None:
        fd = sys.stdin.fileno()
    old_settings = termios.tcgetattr(fd)
    try:
        tty.setraw(fd, termios.TCSANOW)
        data = os.read(fd, 1)
        if data == b"\x1b":
            # Esc solo o inicio de una secuencia de escape
            while select.select([fd], [], [], 0.02)[0]:
                data += os.read(fd, 1)
                if len(data) >= 3 and (data[-1:].isalpha() or data[-1:] == b"~"):
                    break
        elif data:
            remaining = _utf8_length(data[0]) - 1
            while remaining > 0:
                chunk = os.read(fd, remaining)
                if not chunk:
                    break
                data += chunk
                remaining = _utf8_length(data[0]) - len(data)
        return data.decode("utf-8", errors="replace")
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)


def get_key() -> Optional[KeyEvent]:
    """Lee una tecla del usuario. Retorna None si no se reconoce."""
    if os.name == "nt":
        return decode_key(_read_windows())
    return decode_key(_read_unix())
