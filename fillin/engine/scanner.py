"""
Delimiter scanning and escape normalization.

A delimiter occurrence immediately preceded by the escape marker is
literal text, never structural. Delimiters are matched verbatim, not
as patterns.
"""

import re


DEFAULT_ESCAPE = '\\'


def real_index(text: str, delim: str, last: bool = False, escape: str = DEFAULT_ESCAPE) -> int:
    """
    Find an unescaped occurrence of a delimiter.

    Args:
        text: Buffer to search
        delim: Delimiter literal
        last: Return the last occurrence instead of the first
        escape: Escape marker character

    Returns:
        Index of the occurrence, or -1 if there is none
    """
    if last:
        pos = text.rfind(delim)
        while pos != -1:
            if pos == 0 or text[pos - 1] != escape:
                return pos
            pos = text.rfind(delim, 0, pos + len(delim) - 1)
        return -1

    pos = text.find(delim)
    while pos != -1:
        if pos == 0 or text[pos - 1] != escape:
            return pos
        pos = text.find(delim, pos + 1)
    return -1


def unquote(text: str, left: str, right: str, escape: str = DEFAULT_ESCAPE) -> str:
    """
    Strip escape markers from escaped delimiters in finalized plain text.

    Args:
        text: Plain text that takes no further part in scanning
        left: Left delimiter literal
        right: Right delimiter literal
        escape: Escape marker character

    Returns:
        Text with every escape+delimiter replaced by the bare delimiter
    """
    pattern = re.escape(escape) + '(' + re.escape(right) + '|' + re.escape(left) + ')'
    return re.sub(pattern, lambda m: m.group(1), text)
