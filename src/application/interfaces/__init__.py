# Application Interfaces (Protocols)
from src.application.interfaces.page_resolver import PageResolver
from src.application.interfaces.subtitle_downloader import SubtitleDownloader
from src.application.interfaces.track_extractor import TrackExtractor
from src.application.interfaces.track_list_fetcher import TrackListFetcher

__all__ = [
    "PageResolver",
    "TrackExtractor",
    "TrackListFetcher",
    "SubtitleDownloader",
]
