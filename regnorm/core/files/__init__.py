"""Registry file access: path layout, entities, JSON descriptors and logos."""

from .asset_file import AssetFile, FileKind, classify
from .documents import (
    ACTIVE_STATUS,
    AssetInfoModel,
    ChainInfoModel,
    JsonDocument,
    TokenItemModel,
    TokenListModel,
    format_json_file,
    read_document,
    read_json,
    write_document,
    write_json,
)
from .images import file_size, png_dimensions, resize_png
from .layout import RegistryLayout

__all__ = [
    "AssetFile",
    "FileKind",
    "classify",
    "ACTIVE_STATUS",
    "AssetInfoModel",
    "ChainInfoModel",
    "JsonDocument",
    "TokenItemModel",
    "TokenListModel",
    "format_json_file",
    "read_document",
    "read_json",
    "write_document",
    "write_json",
    "file_size",
    "png_dimensions",
    "resize_png",
    "RegistryLayout",
]
