"""字幕ファイルのダウンロードと保存"""

from pathlib import Path

import httpx

from src.domain.entities import SubtitleTrack, VideoId
from src.domain.exceptions import DownloadFailedError
from src.infrastructure.http_client import BrowserProfile, absolute_url, build_client
from src.infrastructure.logging_config import get_logger

logger = get_logger(__name__)

# デフォルトの出力ディレクトリ
DEFAULT_OUTPUT_DIR = Path("subtitles")


def with_format(url: str, fmt: str = "srt") -> str:
    """字幕URLにフォーマット指定パラメータ(fmt)を付与した新しいURLを返す"""
    url = absolute_url(url)
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}fmt={fmt}"


def subtitle_filename(video_id: VideoId, track: SubtitleTrack) -> str:
    """保存ファイル名（<video_id>_<language>.srt）"""
    return f"{video_id}_{track.language}.srt"


class HttpSubtitleDownloader:
    """httpx による SubtitleDownloader 実装"""

    def __init__(
        self,
        output_dir: Path | str = DEFAULT_OUTPUT_DIR,
        profile: BrowserProfile | None = None,
        timeout: float = 30.0,
        client: httpx.Client | None = None,
    ):
        self.output_dir = Path(output_dir)
        profile = profile or BrowserProfile()
        self.client = client or build_client(
            headers=profile.basic_headers(),
            timeout=timeout,
        )

    def download(self, track: SubtitleTrack, video_id: VideoId) -> Path:
        """
        字幕を取得して、レスポンス本文をそのままファイルに保存

        Args:
            track: ダウンロード対象の字幕トラック
            video_id: YouTube動画ID

        Returns:
            保存したファイルのパス

        Raises:
            DownloadFailedError: 200以外のレスポンス・または通信エラー・取得URLなし
        """
        if not track.fetch_url:
            raise DownloadFailedError(track, "Failed to download subtitle: no caption URL")

        url = with_format(track.fetch_url, "srt")
        logger.debug(f"[字幕] ダウンロード: {url}")

        try:
            response = self.client.get(url)
        except httpx.HTTPError as e:
            raise DownloadFailedError(
                track, f"Failed to download subtitle: {e}"
            ) from e

        if response.status_code != 200:
            raise DownloadFailedError(
                track,
                f"Failed to download subtitle: HTTP {response.status_code}",
                status_code=response.status_code,
            )

        self.output_dir.mkdir(parents=True, exist_ok=True)
        path = self.output_dir / subtitle_filename(video_id, track)
        path.write_bytes(response.content)

        logger.debug(f"  保存完了: {path} ({len(response.content)} bytes)")
        return path

    def close(self) -> None:
        self.client.close()
