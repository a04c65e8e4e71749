"""リダイレクトを辿って動画ページを取得するクライアント"""

from urllib.parse import urljoin

import httpx

from src.domain.entities import ResolvedPage
from src.domain.exceptions import PageFetchError, TooManyRedirectsError
from src.infrastructure.http_client import BrowserProfile, build_client
from src.infrastructure.logging_config import get_logger

logger = get_logger(__name__)


def is_redirect(response: httpx.Response) -> bool:
    """Location 付きの 3xx レスポンスか"""
    return 300 <= response.status_code < 400 and "location" in response.headers


class HttpPageResolver:
    """httpx による PageResolver 実装"""

    def __init__(
        self,
        profile: BrowserProfile | None = None,
        timeout: float = 30.0,
        skip_tls_verify: bool = False,
        client: httpx.Client | None = None,
    ):
        """
        Args:
            profile: リクエストヘッダー
            timeout: リクエストごとのタイムアウト（秒）
            skip_tls_verify: TLS証明書検証を無効化する（明示的に指定した場合のみ）
            client: テスト用のクライアント差し替え
        """
        profile = profile or BrowserProfile()
        self.skip_tls_verify = skip_tls_verify
        if skip_tls_verify:
            logger.warning("[ページ] TLS証明書の検証が無効化されています")
        self.client = client or build_client(
            headers=profile.page_headers(),
            timeout=timeout,
            verify=not skip_tls_verify,
        )

    def resolve(self, url: str, max_hops: int = 5) -> ResolvedPage:
        """
        リダイレクトを辿って最終的なページを取得

        2xx 以外のステータス（リダイレクトを除く）もエラーにせずそのまま返す。

        Args:
            url: 最初にアクセスするURL
            max_hops: 最大リクエスト回数

        Returns:
            最終URLとレスポンス本文

        Raises:
            TooManyRedirectsError: max_hops 回のリクエストで終端に到達しない
            PageFetchError: 通信エラー
        """
        current_url = url

        for hop in range(max_hops):
            try:
                response = self.client.get(current_url)
            except httpx.HTTPError as e:
                raise PageFetchError(f"Failed to fetch {current_url}: {e}") from e

            logger.debug(f"[ページ] {current_url} -> {response.status_code}")

            if is_redirect(response):
                current_url = urljoin(current_url, response.headers["location"])
                logger.debug(f"  リダイレクト ({hop + 1}/{max_hops}): {current_url}")
                continue

            if not response.is_success:
                logger.debug(f"  想定外のステータス: {response.status_code}")

            return ResolvedPage(
                url=current_url,
                status_code=response.status_code,
                body=response.text,
            )

        raise TooManyRedirectsError("Too many redirects")

    def close(self) -> None:
        self.client.close()
