# Use Cases
from src.application.usecases.fetch_subtitles import (
    FetchSubtitlesConfig,
    FetchSubtitlesUseCase,
)

__all__ = [
    "FetchSubtitlesUseCase",
    "FetchSubtitlesConfig",
]
