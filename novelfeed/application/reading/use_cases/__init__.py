from .reading_progress_use_case import ReadingProgressUseCase

__all__ = [
    "ReadingProgressUseCase",
]
