"""動画ページに埋め込まれた captionTracks から字幕トラックを抽出"""

import json
import re
from dataclasses import dataclass
from typing import Any

from src.domain.entities import SubtitleTrack
from src.domain.exceptions import TrackParseError
from src.infrastructure.logging_config import get_logger

logger = get_logger(__name__)

# \" \\ \/ \b \f \n \r \t → バックスラッシュを除去
_ESCAPED_PUNCTUATION = re.compile(r'\\(["\\/bfnrt])')
# \uXXXX → 文字そのもの
_UNICODE_ESCAPE = re.compile(r"\\u([0-9a-fA-F]{4})")


def unescape_json_fragment(text: str) -> str:
    """
    HTML内のJS文字列に埋め込まれたJSON断片のエスケープを解除

    Example:
        unescape_json_fragment(r'{\\"name\\":\\"\\u4e2d\\u6587\\"}')
        → '{"name":"中文"}'
    """
    text = _ESCAPED_PUNCTUATION.sub(r"\1", text)
    return _UNICODE_ESCAPE.sub(lambda m: chr(int(m.group(1), 16)), text)


def _track_name(raw: Any) -> str:
    """name フィールドから表示名を取り出す"""
    if isinstance(raw, dict):
        if "simpleText" in raw:
            return str(raw["simpleText"])
        runs = raw.get("runs")
        if isinstance(runs, list):
            return "".join(str(run.get("text", "")) for run in runs if isinstance(run, dict))
        return ""
    if raw is None:
        return ""
    return str(raw)


def _to_track(item: Any) -> SubtitleTrack | None:
    """トラックオブジェクト1件を SubtitleTrack に変換（言語コードか取得URLがなければNone）"""
    if not isinstance(item, dict):
        return None

    language = item.get("languageCode")
    base_url = item.get("baseUrl")
    if not language or not base_url:
        return None

    # 自動生成字幕(kind=asr)も除外せずに含める
    return SubtitleTrack(
        language=str(language),
        name=_track_name(item.get("name")),
        fetch_url=str(base_url),
        is_auto_generated=item.get("kind") == "asr",
    )


def parse_candidate(fragment: str) -> list[SubtitleTrack]:
    """
    正規表現でマッチしたJSON配列の断片をパース

    Raises:
        TrackParseError: JSONとして解釈できない、または配列ではない
    """
    clean_json = unescape_json_fragment(fragment)
    try:
        data = json.loads(clean_json)
    except json.JSONDecodeError as e:
        raise TrackParseError(f"JSON parsing error: {e}") from e

    if not isinstance(data, list):
        raise TrackParseError(f"Expected a JSON array, got {type(data).__name__}")

    tracks = []
    for item in data:
        track = _to_track(item)
        if track is None:
            logger.debug(f"  言語コードまたはbaseUrlのないトラックをスキップ: {item!r}")
            continue
        tracks.append(track)
    return tracks


@dataclass(frozen=True)
class TrackPattern:
    """1つの抽出戦略（キー表記ごとの正規表現）"""

    name: str
    regex: re.Pattern

    def extract(self, body: str) -> list[SubtitleTrack] | None:
        """
        マッチした候補を順にパースし、最初に得られた非空の結果を返す

        Returns:
            字幕トラックのリスト、見つからない場合はNone
        """
        for index, match in enumerate(self.regex.finditer(body)):
            try:
                tracks = parse_candidate(match.group(1))
            except TrackParseError as e:
                # 個別候補の失敗は無視して次の候補へ
                logger.debug(f"  [{self.name}] 候補{index}のパース失敗: {e}")
                continue
            if tracks:
                return tracks
        return None


def _pattern(key: str) -> TrackPattern:
    return TrackPattern(name=key, regex=re.compile(re.escape(key) + r":\s*(\[.*?\])"))


# 優先順位順（YouTube のマークアップ変更の履歴に対応）
DEFAULT_PATTERNS: tuple[TrackPattern, ...] = (
    _pattern("'caption_tracks'"),
    _pattern('"caption_tracks"'),
    _pattern("'captionTracks'"),
    _pattern('"captionTracks"'),
)


class CaptionTrackExtractor:
    """
    動画ページのHTMLから字幕トラック一覧を抽出する TrackExtractor 実装

    パターンを優先順に試し、最初に結果が得られたパターンの結果のみを返す。
    複数パターンの結果をマージすることはない。
    """

    def __init__(self, patterns: tuple[TrackPattern, ...] = DEFAULT_PATTERNS):
        self.patterns = patterns

    def extract(self, body: str) -> list[SubtitleTrack]:
        for pattern in self.patterns:
            tracks = pattern.extract(body)
            if tracks:
                logger.debug(f"[字幕] パターン {pattern.name} で{len(tracks)}件を抽出")
                return tracks
            logger.debug(f"[字幕] パターン {pattern.name}: 該当なし")
        return []
