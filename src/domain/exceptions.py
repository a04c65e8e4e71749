"""ドメイン固有の例外定義"""


class SubFetchError(Exception):
    """基底例外クラス"""

    pass


class InvalidUrlError(SubFetchError):
    """YouTube URL として解釈できない"""

    pass


class TooManyRedirectsError(SubFetchError):
    """リダイレクト回数の上限超過"""

    pass


class PageFetchError(SubFetchError):
    """動画ページの取得に失敗（通信エラー）"""

    pass


class NoSubtitlesFoundError(SubFetchError):
    """字幕が1件も見つからない"""

    pass


class NoSubtitlesForLanguageError(SubFetchError):
    """指定言語の字幕が見つからない"""

    def __init__(self, language: str):
        super().__init__(f"No subtitles found for language: {language}")
        self.language = language


class DownloadFailedError(SubFetchError):
    """
    字幕ファイルのダウンロード失敗

    1トラック単位のソフトエラー。バッチ全体は中断しない。
    """

    def __init__(self, track, reason: str, status_code: int | None = None):
        super().__init__(reason)
        self.track = track
        self.reason = reason
        self.status_code = status_code


class TrackParseError(SubFetchError):
    """字幕トラック候補のパース失敗（抽出処理の内部でのみ使用）"""

    pass
