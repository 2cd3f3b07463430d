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

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Union


class FilesystemPort(ABC):
    """Abstract interface for the file access needed to upload a media file."""

    @abstractmethod
    def size(self, path: Union[str, Path]) -> int:
        """Return the size of the file in bytes. Raises OSError when unavailable."""
        raise NotImplementedError

    @abstractmethod
    async def read_bytes(self, path: Union[str, Path]) -> bytes:
        """Read the whole file without blocking the event loop. Raises OSError."""
        raise NotImplementedError
