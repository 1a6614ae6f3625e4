"""
Pairing code rendering.

Shows the client's QR payload in the operator's terminal so it can be
scanned from WhatsApp > Linked devices.
"""

import sys
from typing import Optional, TextIO

import segno


def render_pairing_code(code: str, out: Optional[TextIO] = None) -> None:
    """Write the code as a half-block QR (two modules per character row)."""
    qr = segno.make_qr(code, error="l")
    qr.terminal(out=out or sys.stdout, compact=True)
