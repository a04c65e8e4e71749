"""コマンドラインエントリーポイント"""

import argparse
import sys
from pathlib import Path

# プロジェクトルートをパスに追加
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# .envファイルを最初に読み込む
from dotenv import load_dotenv
load_dotenv(project_root / ".env")

from config.settings import Settings, get_settings
from src.application.usecases.fetch_subtitles import (
    FetchSubtitlesConfig,
    FetchSubtitlesUseCase,
)
from src.domain.entities import FailedDownload, FetchRequest, FetchResult, SelectionMode
from src.domain.exceptions import SubFetchError
from src.infrastructure.caption_tracks import CaptionTrackExtractor
from src.infrastructure.logging_config import get_logger, resolve_log_level, setup_logging
from src.infrastructure.page_resolver import HttpPageResolver
from src.infrastructure.subtitle_downloader import HttpSubtitleDownloader
from src.infrastructure.timedtext_api import TimedTextListClient

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="yt-sub-fetch",
        description="Download subtitles of a YouTube video.",
        usage="%(prog)s [options] URL",
    )
    parser.add_argument("-u", "--url", help="YouTube video URL")
    parser.add_argument(
        "-l", "--language", help="Subtitle language code (e.g., en, zh-TW)"
    )
    parser.add_argument(
        "-L", "--list", action="store_true", help="List available subtitle languages"
    )
    parser.add_argument(
        "-a", "--all", dest="all_languages", action="store_true",
        help="Download all subtitles",
    )
    parser.add_argument(
        "-d", "--debug", action="store_true", help="Enable debug output"
    )
    parser.add_argument(
        "-k", "--insecure", action="store_true",
        help="Skip TLS certificate verification when fetching the video page",
    )
    parser.add_argument(
        "-o", "--output-dir", help="Directory to save subtitles (default: subtitles)"
    )
    parser.add_argument("url_arg", nargs="?", metavar="URL", help=argparse.SUPPRESS)
    return parser


def parse_options(argv: list[str] | None = None) -> argparse.Namespace:
    """
    コマンドライン引数をパース

    --url がなければ位置引数のURLを使う。
    モードの優先順位: --list > --all > --language
    """
    parser = build_parser()
    options = parser.parse_args(argv)

    options.url = options.url or options.url_arg
    if not options.url:
        parser.error("YouTube video URL is required")

    if not (options.list or options.all_languages or options.language):
        parser.error("one of --language, --list or --all is required")

    return options


def to_request(options: argparse.Namespace) -> FetchRequest:
    """パース済みオプションをリクエストに変換"""
    if options.list:
        mode = SelectionMode.LIST
    elif options.all_languages:
        mode = SelectionMode.ALL
    else:
        mode = SelectionMode.LANGUAGE
    return FetchRequest(url=options.url, mode=mode, language=options.language)


def build_usecase(
    settings: Settings,
    debug: bool = False,
    insecure: bool = False,
    output_dir: str | None = None,
) -> FetchSubtitlesUseCase:
    """DIでユースケースを組み立て"""
    profile = settings.browser_profile()

    return FetchSubtitlesUseCase(
        page_resolver=HttpPageResolver(
            profile=profile,
            timeout=settings.HTTP_TIMEOUT,
            skip_tls_verify=insecure or settings.SKIP_TLS_VERIFY,
        ),
        track_extractor=CaptionTrackExtractor(),
        track_list_fetcher=TimedTextListClient(
            endpoints=settings.LEGACY_LIST_ENDPOINTS,
            profile=profile,
            timeout=settings.HTTP_TIMEOUT,
        ),
        subtitle_downloader=HttpSubtitleDownloader(
            output_dir=output_dir or settings.OUTPUT_DIR,
            profile=profile,
            timeout=settings.HTTP_TIMEOUT,
        ),
        config=FetchSubtitlesConfig(
            max_redirects=settings.MAX_REDIRECTS,
            debug_dump_path=Path(settings.DEBUG_DUMP_PATH) if debug else None,
        ),
    )


def close_usecase(usecase: FetchSubtitlesUseCase) -> None:
    """ユースケースが持つHTTPクライアントを閉じる"""
    usecase.page_resolver.close()
    usecase.track_list_fetcher.close()
    usecase.subtitle_downloader.close()


def report(result: FetchResult) -> int:
    """結果を表示して終了コードを返す"""
    if result.mode is SelectionMode.LIST:
        for track in result.tracks:
            print(track.label)
        # 一覧表示はダウンロードなしの終了として扱う
        return 1

    for item in result.outcomes:
        if isinstance(item, FailedDownload):
            print(item.reason)
        else:
            print(f"Downloaded subtitle for {item.track.language} to {item.path}")

    return 0 if result.succeeded else 1


def main(
    argv: list[str] | None = None,
    usecase: FetchSubtitlesUseCase | None = None,
) -> int:
    options = parse_options(argv)
    settings = get_settings()

    setup_logging(level=resolve_log_level(settings.LOG_LEVEL, debug=options.debug))

    # 自前で組み立てた場合のみクライアントを閉じる
    owns_usecase = usecase is None
    if usecase is None:
        usecase = build_usecase(
            settings,
            debug=options.debug,
            insecure=options.insecure,
            output_dir=options.output_dir,
        )

    try:
        result = usecase.execute(to_request(options))
    except SubFetchError as e:
        print(f"Error: {e}")
        logger.debug("Traceback:", exc_info=True)
        return 1
    finally:
        if owns_usecase:
            close_usecase(usecase)

    return report(result)


if __name__ == "__main__":
    sys.exit(main())
