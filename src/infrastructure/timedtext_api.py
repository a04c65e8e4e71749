"""旧来の timedtext 字幕一覧エンドポイントのクライアント"""

import html
import re
from urllib.parse import urlencode

import httpx

from src.domain.entities import SubtitleTrack, VideoId
from src.infrastructure.http_client import BrowserProfile, YOUTUBE_BASE_URL, build_client
from src.infrastructure.logging_config import get_logger

logger = get_logger(__name__)

LEGACY_LIST_ENDPOINTS: tuple[str, ...] = (
    "https://www.youtube.com/api/timedtext?type=list&v={video_id}",
    "https://video.google.com/timedtext?type=list&v={video_id}",
)

# <track ...> タグ（属性の順序・追加属性は問わない、引用符内の > は許容）
_TRACK_TAG = re.compile(r"""<track\b((?:[^>"']|"[^"]*"|'[^']*')*)>""", re.IGNORECASE)
_ATTRIBUTE = re.compile(r"""([\w:-]+)\s*=\s*(?:"([^"]*)"|'([^']*)')""")


def caption_url(language: str, video_id: VideoId) -> str:
    """言語ごとの字幕取得URL"""
    query = urlencode({"lang": language, "v": str(video_id)})
    return f"{YOUTUBE_BASE_URL}/api/timedtext?{query}"


def _attributes(raw: str) -> dict[str, str]:
    return {
        m.group(1).lower(): html.unescape(m.group(2) if m.group(2) is not None else m.group(3))
        for m in _ATTRIBUTE.finditer(raw)
    }


def parse_track_list(body: str, video_id: VideoId) -> list[SubtitleTrack]:
    """
    字幕一覧レスポンス（XML風）から字幕トラックを抽出

    Example:
        <transcript_list docid="123">
          <track id="0" name="" lang_code="en" lang_original="English"/>
        </transcript_list>
        → [SubtitleTrack(language="en", name="", ...)]
    """
    tracks = []
    for match in _TRACK_TAG.finditer(body):
        attrs = _attributes(match.group(1))
        language = attrs.get("lang_code")
        if not language:
            continue
        tracks.append(
            SubtitleTrack(
                language=language,
                name=attrs.get("name", ""),
                fetch_url=caption_url(language, video_id),
            )
        )
    return tracks


class TimedTextListClient:
    """timedtext 一覧APIによる TrackListFetcher 実装"""

    def __init__(
        self,
        endpoints: tuple[str, ...] | list[str] = LEGACY_LIST_ENDPOINTS,
        profile: BrowserProfile | None = None,
        timeout: float = 30.0,
        client: httpx.Client | None = None,
    ):
        self.endpoints = tuple(endpoints)
        profile = profile or BrowserProfile()
        self.client = client or build_client(
            headers=profile.basic_headers(),
            timeout=timeout,
        )

    def fetch(self, video_id: VideoId) -> list[SubtitleTrack]:
        """
        エンドポイントを順に試し、最初に字幕が見つかった結果を返す

        エンドポイント単位のエラーは握りつぶし、呼び出し元には伝播しない。
        """
        for template in self.endpoints:
            url = template.format(video_id=video_id)
            try:
                response = self.client.get(url)
            except httpx.HTTPError as e:
                logger.debug(f"[API] 取得エラー: {url} - {e}")
                continue

            logger.debug(f"[API] {url} -> {response.status_code}")
            if response.status_code != 200:
                continue

            tracks = parse_track_list(response.text, video_id)
            if tracks:
                return tracks

        return []

    def close(self) -> None:
        self.client.close()
