"""
HTML to WhatsApp text conversion.

Completion models often answer with a handful of HTML tags. WhatsApp shows
them verbatim, so they are swapped for plain-text equivalents.

This is literal substring substitution, not a parser: nested or malformed
markup comes out correspondingly malformed.
"""

# Order matters: "</p>\n" must be handled before "</p>".
_REPLACEMENTS = (
    ("</p>\n", "\n"),
    ("</p>", "\n"),
    ("<p>", ""),
    ("<ol>", "- "),
    ("</ol>", "\n"),
    ("<li>", "- "),
    ("</li>", "\n"),
    ("<br>", "\n"),
)


def to_whatsapp_format(html: str) -> str:
    """Replace the known HTML fragments with WhatsApp-friendly text."""
    for fragment, replacement in _REPLACEMENTS:
        html = html.replace(fragment, replacement)
    return html
