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

from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class MediaClassification(str, Enum):
    """
    Categories a media can be classified as.

    Videos are classified by their frames. When frames of more than one
    category match, the most severe one wins:
    csam > harmful-abusive-material > no-known-match.
    """

    CSAM = "csam"
    HARMFUL_ABUSIVE_MATERIAL = "harmful-abusive-material"
    NO_KNOWN_MATCH = "no-known-match"


class MatchType(str, Enum):
    """How a match was established: exact (SHA1) or near (visual hash)."""

    NEAR = "near"
    EXACT = "exact"


class Media(BaseModel):
    """Identity and classification of a media known to the API."""

    model_config = ConfigDict(extra="ignore")

    sha1_base32: str
    sha256_hex: str
    classification: Optional[MediaClassification] = None
    is_match: Optional[bool] = None

    def compute_is_match(self) -> bool:
        """Derive ``is_match`` from ``classification`` and store it."""
        self.is_match = (
            self.classification is not None
            and self.classification != MediaClassification.NO_KNOWN_MATCH
        )
        return self.is_match


class NearMatchDetails(Media):
    # seconds into the submitted video; 0 for still images
    timestamp: float = 0


class ScannedMedia(Media):
    """A scanned media plus any visual or cryptographic matches."""

    match_type: Optional[MatchType] = None
    size_bytes: int
    near_match_details: List[NearMatchDetails] = Field(default_factory=list)


class PdqMatch(BaseModel):
    model_config = ConfigDict(extra="ignore")

    classification: MediaClassification
    match_type: Optional[MatchType] = None
    near_match_details: Optional[NearMatchDetails] = None


class ScannedPdqHashes(BaseModel):
    """Match details keyed by the submitted PDQ hash."""

    model_config = ConfigDict(extra="ignore")

    scanned_hashes: Dict[str, PdqMatch] = Field(default_factory=dict)


class ScanMediaFromUrl(BaseModel):
    url: str


class ScanPdqHashesRequest(BaseModel):
    hashes: List[str]
