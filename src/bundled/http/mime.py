"""Content type lookup from a filename extension.

Backed by the standard ``mimetypes`` table; the table entry is used as
is. An unknown extension has no content type at all.
"""

import mimetypes
from pathlib import PurePosixPath


def content_type_for(name: str) -> str | None:
    """Content type for *name*, or ``None`` when the extension is unknown.

    >>> content_type_for("/assets/site.css")
    'text/css'
    >>> content_type_for("archive.unknownext") is None
    True
    """
    filename = PurePosixPath(name).name
    if not filename:
        return None
    content_type, _ = mimetypes.guess_type(filename, strict=False)
    return content_type
