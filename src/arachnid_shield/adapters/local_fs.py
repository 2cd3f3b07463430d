# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import asyncio
import logging
from pathlib import Path
from typing import Union

from ..ports.filesystem import FilesystemPort

logger = logging.getLogger(__name__)


class LocalFilesystem(FilesystemPort):
    """Local disk access via pathlib; reads run in a worker thread."""

    def size(self, path: Union[str, Path]) -> int:
        return Path(path).stat().st_size

    async def read_bytes(self, path: Union[str, Path]) -> bytes:
        p = Path(path)
        logger.debug("Reading %s", p)
        return await asyncio.to_thread(p.read_bytes)
