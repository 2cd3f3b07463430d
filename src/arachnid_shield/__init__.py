from .client import ArachnidShield
from .config import DEFAULT_BASE_URL, ShieldConfig
from .domain import (
    Blob,
    ConfigurationError,
    Err,
    MatchType,
    Media,
    MediaClassification,
    NearMatchDetails,
    Ok,
    PdqMatch,
    ScannedMedia,
    ScannedPdqHashes,
    ShieldError,
    ShieldResponse,
)

__all__ = [
    "ArachnidShield",
    "Blob",
    "ConfigurationError",
    "DEFAULT_BASE_URL",
    "Err",
    "MatchType",
    "Media",
    "MediaClassification",
    "NearMatchDetails",
    "Ok",
    "PdqMatch",
    "ScannedMedia",
    "ScannedPdqHashes",
    "ShieldConfig",
    "ShieldError",
    "ShieldResponse",
]
