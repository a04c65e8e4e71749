"""YouTube URL から動画IDを抽出するユーティリティ"""

import re

from src.domain.entities import VideoId
from src.domain.exceptions import InvalidUrlError

# watch?v= / embed/ / v/ / youtu.be/ 形式（スキーム・www. は省略可）
YOUTUBE_URL_PATTERN = re.compile(
    r"^(https?://)?(www\.)?(youtube\.com/(watch\?v=|embed/|v/)|youtu\.be/)([^&\s]+)"
)

# v= またはパス区切りの直後に続く11文字
VIDEO_ID_CAPTURE_PATTERN = re.compile(r"(?:v=|/)([0-9A-Za-z_-]{11})")


def is_youtube_url(url: str) -> bool:
    """対応しているYouTube URL形式かどうか"""
    return bool(YOUTUBE_URL_PATTERN.match(url.strip()))


def extract_video_id(url: str) -> VideoId:
    """
    YouTube URL から動画IDを抽出

    Args:
        url: ユーザーが入力したURL

    Returns:
        VideoId

    Raises:
        InvalidUrlError: 対応していないURL、またはIDが見つからない

    Example:
        extract_video_id("https://www.youtube.com/watch?v=0oNX_BHgi32")
        → VideoId("0oNX_BHgi32")
    """
    candidate = url.strip()
    if not is_youtube_url(candidate):
        raise InvalidUrlError(
            "Invalid YouTube URL. Please provide a valid YouTube video URL."
        )

    match = VIDEO_ID_CAPTURE_PATTERN.search(candidate)
    if not match:
        raise InvalidUrlError(f"Invalid YouTube URL: {url}")

    return VideoId(match.group(1))
