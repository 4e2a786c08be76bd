"""JSON descriptor models and read/modify/write helpers.

Descriptors are read into pydantic models for typed access to the fields the
fixers reconcile. Everything else rides along verbatim: models allow extra
fields, and writes merge the model's explicitly-set values back over the
original mapping so unrelated keys keep their values and their order.
"""

from __future__ import annotations

import json
import os

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from regnorm.core.config import DEFAULT_JSON_INDENT
from regnorm.core.errors import RegistryIOError

from .replace import discard, sibling_temp_path

ACTIVE_STATUS = "active"


class DescriptorModel(BaseModel):
    """Base for registry JSON documents. Unknown fields are preserved."""

    model_config = ConfigDict(extra="allow")


class ChainInfoModel(DescriptorModel):
    name: Optional[str] = None
    type: Optional[str] = None
    symbol: Optional[str] = None
    status: Optional[str] = None


class AssetInfoModel(DescriptorModel):
    name: Optional[str] = None
    type: Optional[str] = None
    symbol: Optional[str] = None
    explorer: Optional[str] = None
    status: Optional[str] = None
    id: Optional[str] = None

    def get_status(self) -> str:
        return self.status or ""

    @property
    def is_active(self) -> bool:
        return self.get_status() == ACTIVE_STATUS


class TokenItemModel(DescriptorModel):
    asset: Optional[str] = None
    type: Optional[str] = None
    address: Optional[str] = None


class VersionModel(DescriptorModel):
    major: int = 0
    minor: int = 0
    patch: int = 0


class TokenListModel(DescriptorModel):
    name: Optional[str] = None
    logoURI: Optional[str] = None
    timestamp: Optional[str] = None
    tokens: List[TokenItemModel] = Field(default_factory=list)
    version: Optional[VersionModel] = None


M = TypeVar("M", bound=DescriptorModel)


@dataclass
class JsonDocument(Generic[M]):
    """A descriptor as read from disk: the raw mapping plus its typed view."""

    path: Path
    raw: Dict[str, Any]
    model: M

    def merged(self) -> Dict[str, Any]:
        """Raw mapping with every explicitly-set model field applied on top.

        Existing keys keep their position; newly set keys are appended.
        """

        out = dict(self.raw)
        for key in type(self.model).model_fields:
            if key not in self.model.model_fields_set:
                continue
            value = getattr(self.model, key)
            if isinstance(value, BaseModel):
                value = value.model_dump(mode="json", exclude_unset=True)
            elif isinstance(value, list):
                value = [
                    v.model_dump(mode="json", exclude_unset=True) if isinstance(v, BaseModel) else v
                    for v in value
                ]
            if key not in out or out[key] != value:
                out[key] = value
        return out


def read_json(path: str | Path) -> Any:
    """Read and parse a JSON file, wrapping failures in RegistryIOError."""

    p = Path(path)
    try:
        with open(p, "r", encoding="utf-8") as f:
            return json.load(f)
    except OSError as e:
        raise RegistryIOError(str(p), "read", e.strerror or str(e)) from e
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise RegistryIOError(str(p), "parse", str(e)) from e


def read_document(path: str | Path, model_cls: Type[M]) -> JsonDocument[M]:
    """Read a JSON object file into a JsonDocument of model_cls."""

    p = Path(path)
    raw = read_json(p)
    if not isinstance(raw, dict):
        raise RegistryIOError(str(p), "parse", "top-level JSON value is not an object")
    try:
        model = model_cls.model_validate(raw)
    except ValidationError as e:
        raise RegistryIOError(str(p), "parse", str(e)) from e
    return JsonDocument(path=p, raw=raw, model=model)


def dumps_pretty(data: Any, *, indent: int = DEFAULT_JSON_INDENT) -> str:
    return json.dumps(data, indent=indent, ensure_ascii=False) + "\n"


def write_json(path: str | Path, data: Any, *, indent: int = DEFAULT_JSON_INDENT) -> None:
    """Write data as pretty-printed JSON.

    The text is fully rendered before the file is touched and lands via an
    atomic replace, so readers never observe a partial document.
    """

    p = Path(path)
    text = dumps_pretty(data, indent=indent)
    tmp = sibling_temp_path(p, "write")
    try:
        with open(tmp, "w", encoding="utf-8") as f:
            f.write(text)
        os.replace(tmp, p)
    except OSError as e:
        discard(tmp)
        raise RegistryIOError(str(p), "write", e.strerror or str(e)) from e


def write_document(doc: JsonDocument[Any], *, indent: int = DEFAULT_JSON_INDENT) -> None:
    write_json(doc.path, doc.merged(), indent=indent)


def format_json_file(path: str | Path, *, indent: int = DEFAULT_JSON_INDENT) -> bool:
    """Rewrite a JSON file in canonical pretty form if its bytes differ.

    Returns True when the file was rewritten.
    """

    p = Path(path)
    data = read_json(p)
    try:
        current = p.read_text(encoding="utf-8")
    except OSError as e:
        raise RegistryIOError(str(p), "read", e.strerror or str(e)) from e

    formatted = dumps_pretty(data, indent=indent)
    if current == formatted:
        return False
    write_json(p, data, indent=indent)
    return True
