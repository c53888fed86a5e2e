"""Application use cases package."""

from .get_category_filter_options import GetCategoryFilterOptionsUseCase
from .get_drill_down_view import DrillDownView, GetDrillDownViewUseCase
from .get_trend_view import GetTrendViewUseCase
from .manage_files import (
    ClearFilesUseCase,
    DeleteFileUseCase,
    ImportCsvFileUseCase,
    ListFilesUseCase,
    LoadFileUseCase,
)

__all__ = [
    "GetCategoryFilterOptionsUseCase",
    "GetDrillDownViewUseCase",
    "DrillDownView",
    "GetTrendViewUseCase",
    "ImportCsvFileUseCase",
    "ListFilesUseCase",
    "LoadFileUseCase",
    "DeleteFileUseCase",
    "ClearFilesUseCase",
]
