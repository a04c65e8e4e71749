"""字幕一覧API インターフェース"""

from typing import Protocol

from src.domain.entities import SubtitleTrack, VideoId


class TrackListFetcher(Protocol):
    """旧来の字幕一覧エンドポイントから字幕トラックを取得するインターフェース"""

    def fetch(self, video_id: VideoId) -> list[SubtitleTrack]:
        """
        字幕一覧エンドポイントから字幕トラックを取得

        Args:
            video_id: YouTube動画ID

        Returns:
            字幕トラックのリスト（エラー時も空リスト）
        """
        ...

    def close(self) -> None:
        """保持している接続を解放"""
        ...
