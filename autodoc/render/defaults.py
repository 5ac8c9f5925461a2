"""
Formatting of input default values for table cells.

Every value produced here is a single physical line with no unescaped pipe,
so it can be embedded in a markdown table cell as-is.
"""

from ..constants import LINE_BREAK, NEWLINE_SEPARATOR, PIPE_SEPARATOR

_SHORT_ESCAPES = {
    "\a": r"\a",
    "\b": r"\b",
    "\f": r"\f",
    "\n": r"\n",
    "\r": r"\r",
    "\t": r"\t",
    "\v": r"\v",
    "\\": r"\\",
    '"': r"\"",
}


def go_quote(value: str) -> str:
    """
    Quote a string the way Go's strconv.Quote (and %#v) does.

    Printable characters are kept, quotes and backslashes are escaped, and
    everything else uses a short escape or a \\x, \\u or \\U sequence.
    """
    out = ['"']
    for ch in value:
        if ch in _SHORT_ESCAPES:
            out.append(_SHORT_ESCAPES[ch])
        elif ch.isprintable():
            out.append(ch)
        else:
            code = ord(ch)
            if code < 0x20 or code == 0x7F:
                out.append(f"\\x{code:02x}")
            elif code < 0x10000:
                out.append(f"\\u{code:04x}")
            else:
                out.append(f"\\U{code:08x}")
    out.append('"')
    return "".join(out)


def escape_pipes(value: str) -> str:
    """Backslash-escape the table column separator."""
    return value.replace(PIPE_SEPARATOR, "\\" + PIPE_SEPARATOR)


def code(value: str) -> str:
    """Wrap a value in inline code markup."""
    return f"`{value}`"


def format_default(raw: str) -> str:
    """
    Format an input's default value for display in a table cell.

    Args:
        raw: Default value as declared in the action definition

    Returns:
        Display-safe cell text; empty when there is no default
    """
    if not raw:
        return ""

    # A lone newline is a separator value, documented as the scalar "\n"
    if NEWLINE_SEPARATOR in raw and raw != NEWLINE_SEPARATOR:
        parts = [part for part in raw.split(NEWLINE_SEPARATOR) if part]
        return LINE_BREAK.join(code(f'"{escape_pipes(part)}"') for part in parts)

    if PIPE_SEPARATOR in raw:
        return code(escape_pipes(raw))
    return code(go_quote(raw))
