"""字幕ダウンロードインターフェース"""

from pathlib import Path
from typing import Protocol

from src.domain.entities import SubtitleTrack, VideoId


class SubtitleDownloader(Protocol):
    """字幕ファイルをダウンロードして保存するインターフェース"""

    def download(self, track: SubtitleTrack, video_id: VideoId) -> Path:
        """
        字幕を取得してファイルに保存

        Args:
            track: ダウンロード対象の字幕トラック
            video_id: YouTube動画ID

        Returns:
            保存したファイルのパス

        Raises:
            DownloadFailedError: HTTPエラー等（トラック単位のソフトエラー）
        """
        ...

    def close(self) -> None:
        """保持している接続を解放"""
        ...
