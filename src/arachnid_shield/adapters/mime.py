# Licensed under the Apache License, Version 2.0
from __future__ import annotations

import mimetypes
from pathlib import Path
from typing import Optional, Union

from ..ports.mime import MimeResolverPort


class ExtensionMimeResolver(MimeResolverPort):
    """
    Guess a MIME type from the file extension (stdlib `mimetypes` table).
    Returns None for unknown or missing extensions.
    """

    def guess(self, path: Union[str, Path]) -> Optional[str]:
        mime_type, _encoding = mimetypes.guess_type(str(path), strict=False)
        return mime_type
