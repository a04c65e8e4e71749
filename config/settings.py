"""設定管理"""

from functools import lru_cache

from pydantic_settings import BaseSettings

from src.infrastructure.http_client import (
    DEFAULT_ACCEPT_LANGUAGE,
    DEFAULT_COOKIE,
    DEFAULT_REFERER,
    DEFAULT_USER_AGENT,
    BrowserProfile,
)
from src.infrastructure.timedtext_api import LEGACY_LIST_ENDPOINTS


class Settings(BaseSettings):
    """アプリケーション設定"""

    # Request headers
    # YouTube はブラウザ以外のUser-Agentに異なる内容を返す
    USER_AGENT: str = DEFAULT_USER_AGENT
    ACCEPT_LANGUAGE: str = DEFAULT_ACCEPT_LANGUAGE
    REFERER: str = DEFAULT_REFERER
    COOKIE: str = DEFAULT_COOKIE

    # Page resolution
    MAX_REDIRECTS: int = 5
    # TLS証明書検証の無効化（明示的に有効化した場合のみ）
    SKIP_TLS_VERIFY: bool = False

    # Fallback
    # {video_id} を動画IDに置換
    LEGACY_LIST_ENDPOINTS: list[str] = list(LEGACY_LIST_ENDPOINTS)

    # Timeouts
    HTTP_TIMEOUT: float = 30.0

    # Paths
    OUTPUT_DIR: str = "subtitles"
    DEBUG_DUMP_PATH: str = "youtube_response.html"

    # Logging
    LOG_LEVEL: str = "INFO"

    def browser_profile(self) -> BrowserProfile:
        """リクエストヘッダー設定を取得"""
        return BrowserProfile(
            user_agent=self.USER_AGENT,
            accept_language=self.ACCEPT_LANGUAGE,
            referer=self.REFERER,
            cookie=self.COOKIE,
        )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


@lru_cache
def get_settings() -> Settings:
    """シングルトンで設定を取得"""
    return Settings()
