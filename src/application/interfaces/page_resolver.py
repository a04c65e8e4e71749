"""ページ解決インターフェース"""

from typing import Protocol

from src.domain.entities import ResolvedPage


class PageResolver(Protocol):
    """リダイレクトを辿って最終ページを取得するインターフェース"""

    def resolve(self, url: str, max_hops: int = 5) -> ResolvedPage:
        """
        リダイレクトを辿って最終的なページを取得

        Args:
            url: 最初にアクセスするURL
            max_hops: 最大リクエスト回数

        Returns:
            最終URLとレスポンス本文

        Raises:
            TooManyRedirectsError: リダイレクト回数の上限超過
        """
        ...

    def close(self) -> None:
        """保持している接続を解放"""
        ...
