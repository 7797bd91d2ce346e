"""
Formatting utilities.
"""

import humanfriendly

from huby.bytesize import ByteSize


def humanize(value: ByteSize, binary: bool = False) -> str:
    """
    Format a byte size to human-friendly representation (e.g. "1.5 KiB").

    The result is intended for display only, use `ByteSize.format()` for the canonical form.
    """
    return humanfriendly.format_size(value.in_bytes(), binary=binary)
