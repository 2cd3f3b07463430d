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

import base64
from dataclasses import dataclass, field
from urllib.parse import urljoin, urlsplit

from .domain.errors import ConfigurationError

DEFAULT_BASE_URL = "https://shield.projectarachnid.ca/"

MEDIA_PATH = "/v1/media/"
URL_PATH = "/v1/url/"
PDQ_PATH = "/v1/pdq/"


def basic_auth_header(username: str, password: str) -> str:
    token = base64.b64encode(f"{username}:{password}".encode("utf-8")).decode("ascii")
    return f"Basic {token}"


@dataclass(frozen=True)
class ShieldConfig:
    """
    Static client configuration: credentials and API base URL.

    The Authorization header value is derived once here and reused for
    every request made with this config.
    """

    username: str
    password: str = field(repr=False)
    base_url: str = DEFAULT_BASE_URL
    auth_header: str = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        parts = urlsplit(self.base_url or "")
        if parts.scheme not in ("http", "https") or not parts.netloc:
            raise ConfigurationError(f"Invalid base URL: {self.base_url!r}")
        # frozen dataclass: bypass __setattr__ for the derived field
        object.__setattr__(
            self, "auth_header", basic_auth_header(self.username, self.password)
        )

    def endpoint(self, path: str) -> str:
        """Absolute URL for an API path; an absolute path replaces any base path."""
        return urljoin(self.base_url, path)
