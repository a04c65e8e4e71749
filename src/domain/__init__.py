# Domain Layer
from src.domain.entities import (
    DownloadedSubtitle,
    FailedDownload,
    FetchRequest,
    FetchResult,
    ResolvedPage,
    SelectionMode,
    SubtitleTrack,
    VideoId,
)
from src.domain.exceptions import (
    DownloadFailedError,
    InvalidUrlError,
    NoSubtitlesForLanguageError,
    NoSubtitlesFoundError,
    PageFetchError,
    SubFetchError,
    TooManyRedirectsError,
    TrackParseError,
)

__all__ = [
    "VideoId",
    "SubtitleTrack",
    "ResolvedPage",
    "SelectionMode",
    "FetchRequest",
    "FetchResult",
    "DownloadedSubtitle",
    "FailedDownload",
    "SubFetchError",
    "InvalidUrlError",
    "TooManyRedirectsError",
    "PageFetchError",
    "NoSubtitlesFoundError",
    "NoSubtitlesForLanguageError",
    "DownloadFailedError",
    "TrackParseError",
]
