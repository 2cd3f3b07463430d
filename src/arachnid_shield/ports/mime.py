# Licensed under the Apache License, Version 2.0
from __future__ import annotations

from pathlib import Path
from typing import Optional, Protocol, Union


class MimeResolverPort(Protocol):
    """Maps a file path to a MIME type, or None when it can't tell."""

    def guess(self, path: Union[str, Path]) -> Optional[str]: ...
