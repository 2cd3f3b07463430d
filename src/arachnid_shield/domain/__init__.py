from .errors import ConfigurationError, ShieldError
from .media import Blob, MediaContents, resolve_mime_type
from .models import (
    MatchType,
    Media,
    MediaClassification,
    NearMatchDetails,
    PdqMatch,
    ScanMediaFromUrl,
    ScanPdqHashesRequest,
    ScannedMedia,
    ScannedPdqHashes,
)
from .results import Err, Ok, ShieldResponse

__all__ = [
    "Blob",
    "ConfigurationError",
    "Err",
    "MatchType",
    "Media",
    "MediaClassification",
    "MediaContents",
    "NearMatchDetails",
    "Ok",
    "PdqMatch",
    "ScanMediaFromUrl",
    "ScanPdqHashesRequest",
    "ScannedMedia",
    "ScannedPdqHashes",
    "ShieldError",
    "ShieldResponse",
    "resolve_mime_type",
]
