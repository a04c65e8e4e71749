"""httpx クライアントとブラウザ風ヘッダーの共通設定"""

from dataclasses import dataclass
from urllib.parse import urljoin

import httpx

YOUTUBE_BASE_URL = "https://www.youtube.com"

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/119.0.0.0 Safari/537.36"
)
DEFAULT_ACCEPT_LANGUAGE = "zh-TW,zh;q=0.9,en-US;q=0.8,en;q=0.7"
DEFAULT_REFERER = "https://www.youtube.com/"
DEFAULT_COOKIE = (
    "CONSENT=YES+srp.gws-20231218+FX+436; GPS=1; VISITOR_INFO1_LIVE=some_random_value"
)


@dataclass(frozen=True)
class BrowserProfile:
    """
    ブラウザを装うためのリクエストヘッダー

    YouTube はブラウザ以外の User-Agent に対して異なる内容を返すため必須。
    """

    user_agent: str = DEFAULT_USER_AGENT
    accept_language: str = DEFAULT_ACCEPT_LANGUAGE
    referer: str = DEFAULT_REFERER
    cookie: str = DEFAULT_COOKIE

    def basic_headers(self) -> dict[str, str]:
        """字幕一覧API・字幕ダウンロード用（User-Agent のみ）"""
        return {"User-Agent": self.user_agent}

    def page_headers(self) -> dict[str, str]:
        """動画ページ取得用（レスポンス形式を安定させるため追加ヘッダー付き）"""
        return {
            "User-Agent": self.user_agent,
            "Accept-Language": self.accept_language,
            "Referer": self.referer,
            "Cookie": self.cookie,
        }


def build_client(
    headers: dict[str, str],
    timeout: float = 30.0,
    verify: bool = True,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """
    httpx クライアントを生成

    リダイレクトは呼び出し側で明示的に辿るため自動追従は無効。

    Args:
        headers: 全リクエストに付与するヘッダー
        timeout: リクエストごとのタイムアウト（秒）
        verify: TLS証明書を検証するか
        transport: テスト用のトランスポート差し替え
    """
    return httpx.Client(
        headers=headers,
        timeout=timeout,
        verify=verify,
        follow_redirects=False,
        transport=transport,
    )


def absolute_url(url: str, base: str = YOUTUBE_BASE_URL) -> str:
    """相対URLを絶対URLに変換（入力は変更せず新しい文字列を返す）"""
    return urljoin(base, url)
