"""ドメインエンティティのテスト"""

import pytest

from src.domain.entities import (
    DownloadedSubtitle,
    FailedDownload,
    FetchRequest,
    FetchResult,
    SelectionMode,
    SubtitleTrack,
    VideoId,
)
from src.domain.exceptions import InvalidUrlError, NoSubtitlesForLanguageError


class TestVideoId:
    """VideoIdのテスト"""

    def test_valid_id(self) -> None:
        """11文字のIDを保持"""
        video_id = VideoId("0oNX_BHgi32")
        assert str(video_id) == "0oNX_BHgi32"

    def test_watch_url(self) -> None:
        """視聴ページURL"""
        assert VideoId("0oNX_BHgi32").watch_url == "https://www.youtube.com/watch?v=0oNX_BHgi32"

    @pytest.mark.parametrize("value", ["", "short", "0oNX_BHgi32x", "0oNX BHgi32", "0oNX.BHgi32"])
    def test_invalid_id(self, value: str) -> None:
        """11文字・許可文字以外はエラー"""
        with pytest.raises(InvalidUrlError):
            VideoId(value)

    def test_immutable(self) -> None:
        """値オブジェクトは変更不可"""
        video_id = VideoId("0oNX_BHgi32")
        with pytest.raises(AttributeError):
            video_id.value = "abcdefghijk"  # type: ignore[misc]


class TestSubtitleTrack:
    """SubtitleTrackのテスト"""

    def test_label(self) -> None:
        """一覧表示用ラベル"""
        track = SubtitleTrack(language="zh-TW", name="中文（台灣）", fetch_url="http://x/zh")
        assert track.label == "zh-TW(中文（台灣）)"

    def test_value_equality(self) -> None:
        """同じ値なら等価"""
        a = SubtitleTrack(language="en", name="English", fetch_url="http://x/en")
        b = SubtitleTrack(language="en", name="English", fetch_url="http://x/en")
        assert a == b


class TestFetchRequest:
    """FetchRequestのテスト"""

    def test_language_mode_requires_language(self) -> None:
        """言語モードでは言語コードが必須"""
        with pytest.raises(ValueError, match="language is required"):
            FetchRequest(url="https://youtu.be/0oNX_BHgi32", mode=SelectionMode.LANGUAGE)

    def test_list_mode_without_language(self) -> None:
        """一覧モードでは言語コード不要"""
        request = FetchRequest(url="https://youtu.be/0oNX_BHgi32", mode=SelectionMode.LIST)
        assert request.language is None


class TestFetchResult:
    """FetchResultのテスト"""

    def test_succeeded(self, tmp_path) -> None:
        """1件以上ダウンロードできれば成功"""
        track = SubtitleTrack(language="en", name="English", fetch_url="http://x/en")
        result = FetchResult(
            video_id=VideoId("0oNX_BHgi32"), mode=SelectionMode.ALL, tracks=[track]
        )
        assert not result.succeeded

        result.downloaded.append(DownloadedSubtitle(track=track, path=tmp_path / "a.srt"))
        assert result.succeeded

    def test_outcomes_in_track_order(self, tmp_path) -> None:
        """成功と失敗をトラックの順に並べる"""
        en = SubtitleTrack(language="en", name="English", fetch_url="http://x/en")
        ja = SubtitleTrack(language="ja", name="日本語", fetch_url="http://x/ja")
        zh = SubtitleTrack(language="zh-TW", name="中文", fetch_url="http://x/zh")
        result = FetchResult(
            video_id=VideoId("0oNX_BHgi32"),
            mode=SelectionMode.ALL,
            tracks=[en, ja, zh],
            downloaded=[
                DownloadedSubtitle(track=en, path=tmp_path / "en.srt"),
                DownloadedSubtitle(track=zh, path=tmp_path / "zh.srt"),
            ],
            failed=[FailedDownload(track=ja, reason="HTTP 404")],
        )
        assert [o.track.language for o in result.outcomes] == ["en", "ja", "zh-TW"]


class TestExceptions:
    """例外のテスト"""

    def test_no_subtitles_for_language_message(self) -> None:
        """言語コードがメッセージに含まれる"""
        error = NoSubtitlesForLanguageError("fr")
        assert error.language == "fr"
        assert str(error) == "No subtitles found for language: fr"
