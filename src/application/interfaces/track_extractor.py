"""字幕トラック抽出インターフェース"""

from typing import Protocol

from src.domain.entities import SubtitleTrack


class TrackExtractor(Protocol):
    """ページ本文から字幕トラック一覧を抽出するインターフェース"""

    def extract(self, body: str) -> list[SubtitleTrack]:
        """
        ページ本文から字幕トラックを抽出

        Args:
            body: 動画ページのHTML

        Returns:
            字幕トラックのリスト（見つからない場合は空リスト）
        """
        ...
