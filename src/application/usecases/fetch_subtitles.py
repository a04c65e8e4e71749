"""メインユースケース: YouTube URL から字幕を探してダウンロード"""

from dataclasses import dataclass
from pathlib import Path

from src.application.interfaces.page_resolver import PageResolver
from src.application.interfaces.subtitle_downloader import SubtitleDownloader
from src.application.interfaces.track_extractor import TrackExtractor
from src.application.interfaces.track_list_fetcher import TrackListFetcher
from src.domain.entities import (
    DownloadedSubtitle,
    FailedDownload,
    FetchRequest,
    FetchResult,
    SelectionMode,
    SubtitleTrack,
    VideoId,
)
from src.domain.exceptions import (
    DownloadFailedError,
    NoSubtitlesForLanguageError,
    NoSubtitlesFoundError,
)
from src.domain.video_id import extract_video_id
from src.infrastructure.logging_config import LogContext, get_logger

logger = get_logger(__name__)


@dataclass
class FetchSubtitlesConfig:
    """ユースケースの設定"""

    max_redirects: int = 5
    debug_dump_path: Path | None = None  # 指定時は動画ページの生HTMLを保存


class FetchSubtitlesUseCase:
    """
    メインユースケース: 字幕トラックの探索とダウンロード

    処理の流れ:
        Resolving → Extracting → (FallbackExtracting) → Selecting → Downloading
    致命的なエラーは例外として呼び出し元に伝播する。
    """

    def __init__(
        self,
        page_resolver: PageResolver,
        track_extractor: TrackExtractor,
        track_list_fetcher: TrackListFetcher,
        subtitle_downloader: SubtitleDownloader,
        config: FetchSubtitlesConfig | None = None,
    ):
        self.page_resolver = page_resolver
        self.track_extractor = track_extractor
        self.track_list_fetcher = track_list_fetcher
        self.subtitle_downloader = subtitle_downloader
        self.config = config or FetchSubtitlesConfig()

    def execute(self, request: FetchRequest) -> FetchResult:
        """
        メイン実行フロー

        Args:
            request: 対象URLと選択モード

        Returns:
            FetchResult: 発見したトラックとダウンロード結果

        Raises:
            InvalidUrlError: URLから動画IDを抽出できない
            TooManyRedirectsError: リダイレクト回数の上限超過
            NoSubtitlesFoundError: 字幕が1件も見つからない
            NoSubtitlesForLanguageError: 指定言語の字幕がない
        """
        video_id = extract_video_id(request.url)
        ctx = LogContext(video_id=str(video_id), mode=request.mode.value)
        logger.debug(f"[字幕] 開始: {ctx}")

        tracks = self.find_tracks(video_id)
        if not tracks:
            raise NoSubtitlesFoundError("No subtitles found for this video.")

        result = FetchResult(video_id=video_id, mode=request.mode, tracks=tracks)

        # Phase: Selecting
        if request.mode is SelectionMode.LIST:
            return result

        if request.mode is SelectionMode.ALL:
            selected = tracks
        else:
            selected = [t for t in tracks if t.language == request.language]
            if not selected:
                raise NoSubtitlesForLanguageError(request.language)

        # Phase: Downloading（1件ずつ順番に処理）
        logger.info(f"[字幕] ダウンロード開始: {len(selected)}件 ({ctx})")
        for track in selected:
            track_ctx = ctx.update(language=track.language)
            try:
                path = self.subtitle_downloader.download(track, video_id)
            except DownloadFailedError as e:
                # 個別トラックの失敗は記録して続行
                logger.warning(f"[字幕] ダウンロード失敗: {e.reason} ({track_ctx})")
                result.failed.append(FailedDownload(track=track, reason=e.reason))
                continue
            result.downloaded.append(DownloadedSubtitle(track=track, path=path))

        logger.info(
            f"[字幕] 完了: 成功={len(result.downloaded)}, 失敗={len(result.failed)}"
        )
        return result

    def find_tracks(self, video_id: VideoId) -> list[SubtitleTrack]:
        """
        動画ページから字幕トラックを探し、なければ旧APIにフォールバック

        Returns:
            字幕トラックのリスト（見つからない場合は空リスト）
        """
        # Phase: Resolving
        page = self.page_resolver.resolve(
            video_id.watch_url, max_hops=self.config.max_redirects
        )
        logger.debug(f"[ページ] 最終URL: {page.url} (status={page.status_code})")

        if self.config.debug_dump_path is not None:
            self.config.debug_dump_path.write_text(page.body, encoding="utf-8")
            logger.debug(f"[ページ] レスポンスを保存: {self.config.debug_dump_path}")

        # Phase: Extracting
        tracks = self.track_extractor.extract(page.body)
        if tracks:
            logger.debug(f"[字幕] ページから{len(tracks)}件のトラックを検出")
            return tracks

        # Phase: FallbackExtracting
        logger.debug("[字幕] ページからの抽出に失敗、字幕一覧APIを試行")
        tracks = self.track_list_fetcher.fetch(video_id)
        logger.debug(f"[API] {len(tracks)}件のトラックを検出")
        return tracks
