import re

# One backslash escape: simple character escapes or a \uXXXX code point
_ESCAPE_PATTERN = re.compile(r'\\(u[0-9a-fA-F]{4}|.)', re.DOTALL)

_SIMPLE_ESCAPES = {
    'n': '\n',
    '"': '"',
    '\\': '\\',
    'f': '\f',
    't': '\t',
    'r': '\r',
    '/': '/',
}


def _decode_escape(match: re.Match) -> str:
    token = match.group(1)
    if len(token) == 5 and token[0] == 'u':
        return chr(int(token[1:], 16))
    if token in _SIMPLE_ESCAPES:
        return _SIMPLE_ESCAPES[token]
    # Unknown escape: keep it as written
    return match.group(0)


def unescape_field(value: str) -> str:
    """
    Decode the backslash escapes of a captured field value in a single pass.

    Within one call, an escaped backslash followed by 'n' stays a backslash
    and an 'n' instead of turning into a newline.
    """
    return _ESCAPE_PATTERN.sub(_decode_escape, value)


def clean_section_text(text: str) -> str:
    """
    Clean a case-law section: a second unescape pass, then form feeds and
    stray backslashes removed, then trimmed.

    Sections are cut from content the loader already unescaped, so this pass
    decodes escapes that were doubly escaped in the dump ('\\\\n' in the
    source becomes a newline here).
    """
    text = unescape_field(text)
    text = text.replace('\f', '').replace('\\', '')
    return text.strip()
