# Infrastructure Layer
from src.infrastructure.caption_tracks import CaptionTrackExtractor
from src.infrastructure.page_resolver import HttpPageResolver
from src.infrastructure.subtitle_downloader import HttpSubtitleDownloader
from src.infrastructure.timedtext_api import TimedTextListClient

__all__ = [
    "HttpPageResolver",
    "CaptionTrackExtractor",
    "TimedTextListClient",
    "HttpSubtitleDownloader",
]
