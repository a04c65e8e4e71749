"""ドメインエンティティ定義"""

import re
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from src.domain.exceptions import InvalidUrlError

VIDEO_ID_PATTERN = re.compile(r"^[0-9A-Za-z_-]{11}$")


@dataclass(frozen=True)
class VideoId:
    """YouTube動画IDを表す値オブジェクト（11文字）"""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not VIDEO_ID_PATTERN.match(self.value):
            raise InvalidUrlError(f"Invalid YouTube video ID: {self.value!r}")

    def __str__(self) -> str:
        return self.value

    @property
    def watch_url(self) -> str:
        return f"https://www.youtube.com/watch?v={self.value}"


@dataclass(frozen=True)
class SubtitleTrack:
    """ダウンロード可能な字幕トラック1件"""

    language: str
    name: str
    fetch_url: str
    is_auto_generated: bool = False

    @property
    def label(self) -> str:
        """一覧表示用のラベル（例: en(English)）"""
        return f"{self.language}({self.name})"


@dataclass(frozen=True)
class ResolvedPage:
    """リダイレクト解決後のページ"""

    url: str
    status_code: int
    body: str


class SelectionMode(Enum):
    """字幕の選択モード"""

    LIST = "list"
    ALL = "all"
    LANGUAGE = "language"


@dataclass(frozen=True)
class FetchRequest:
    """字幕取得リクエスト"""

    url: str
    mode: SelectionMode
    language: str | None = None

    def __post_init__(self) -> None:
        if self.mode is SelectionMode.LANGUAGE and not self.language:
            raise ValueError("language is required when mode is LANGUAGE")


@dataclass(frozen=True)
class DownloadedSubtitle:
    """保存済みの字幕ファイル"""

    track: SubtitleTrack
    path: Path


@dataclass(frozen=True)
class FailedDownload:
    """ダウンロードに失敗したトラック"""

    track: SubtitleTrack
    reason: str


@dataclass
class FetchResult:
    """字幕取得の結果全体"""

    video_id: VideoId
    mode: SelectionMode
    tracks: list[SubtitleTrack]
    downloaded: list[DownloadedSubtitle] = field(default_factory=list)
    failed: list[FailedDownload] = field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        """1件以上のダウンロードに成功したか"""
        return bool(self.downloaded)

    @property
    def outcomes(self) -> list[DownloadedSubtitle | FailedDownload]:
        """成功・失敗をトラックの並び順にまとめたもの"""
        def position(item: DownloadedSubtitle | FailedDownload) -> int:
            if item.track in self.tracks:
                return self.tracks.index(item.track)
            return len(self.tracks)

        return sorted([*self.downloaded, *self.failed], key=position)
