import json
import os
import stat
from pathlib import Path

import pytest

from regnorm.core.errors import RegistryIOError
from regnorm.core.files import AssetInfoModel, format_json_file, read_document, write_document
from regnorm.core.files.documents import write_json


def test_write_document_preserves_unknown_fields_and_order(tmp_path: Path) -> None:
    p = tmp_path / "info.json"
    p.write_text(
        json.dumps({"note": "x", "type": "erc20", "nested": {"b": 1, "a": [1, 2]}, "id": "abc"}),
        encoding="utf-8",
    )

    doc = read_document(p, AssetInfoModel)
    doc.model.type = "ERC20"
    doc.model.explorer = "https://etherscan.io/token/abc"
    write_document(doc)

    text = p.read_text(encoding="utf-8")
    data = json.loads(text)
    assert list(data) == ["note", "type", "nested", "id", "explorer"]
    assert data["nested"] == {"b": 1, "a": [1, 2]}
    assert data["type"] == "ERC20"
    assert text.endswith("}\n")
    assert '\n    "note": "x"' in text


def test_read_document_rejects_non_object(tmp_path: Path) -> None:
    p = tmp_path / "info.json"
    p.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(RegistryIOError):
        read_document(p, AssetInfoModel)


def test_read_document_rejects_wrong_field_type(tmp_path: Path) -> None:
    p = tmp_path / "info.json"
    p.write_text('{"status": {"nested": true}}', encoding="utf-8")
    with pytest.raises(RegistryIOError) as ei:
        read_document(p, AssetInfoModel)
    assert ei.value.operation == "parse"


def test_format_json_file_only_writes_when_needed(tmp_path: Path) -> None:
    p = tmp_path / "info.json"
    p.write_text('{"b":1,"a":"é"}', encoding="utf-8")

    assert format_json_file(p) is True
    assert p.read_text(encoding="utf-8") == '{\n    "b": 1,\n    "a": "é"\n}\n'
    assert format_json_file(p) is False


def test_format_json_file_missing(tmp_path: Path) -> None:
    with pytest.raises(RegistryIOError) as ei:
        format_json_file(tmp_path / "nope.json")
    assert ei.value.path.endswith("nope.json")


def test_write_json_new_file_follows_umask(tmp_path: Path) -> None:
    p = tmp_path / "new.json"
    old = os.umask(0o022)
    try:
        write_json(p, {"a": 1})
    finally:
        os.umask(old)

    assert json.loads(p.read_text(encoding="utf-8")) == {"a": 1}
    assert stat.S_IMODE(p.stat().st_mode) == 0o644
    assert [x.name for x in tmp_path.iterdir()] == ["new.json"]
