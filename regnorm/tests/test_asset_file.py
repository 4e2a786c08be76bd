from pathlib import Path

from regnorm.core.files import FileKind, RegistryLayout, classify


def test_classify_registry_paths(tmp_path: Path) -> None:
    layout = RegistryLayout(tmp_path)
    addr = "0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed"

    cases = {
        layout.chain_info_path("ethereum"): (FileKind.CHAIN_INFO, ""),
        layout.chain_logo_path("ethereum"): (FileKind.CHAIN_LOGO, ""),
        layout.asset_dir("ethereum", addr): (FileKind.ASSET_FOLDER, addr),
        layout.asset_info_path("ethereum", addr): (FileKind.ASSET_INFO, addr),
        layout.asset_logo_path("ethereum", addr): (FileKind.ASSET_LOGO, addr),
        layout.token_list_path("ethereum"): (FileKind.TOKEN_LIST, ""),
        layout.token_list_path("ethereum", extended=True): (FileKind.TOKEN_LIST, ""),
        layout.asset_dir("ethereum", addr) / "readme.md": (FileKind.UNKNOWN, addr),
    }
    for path, (kind, asset) in cases.items():
        f = classify(layout, path)
        assert f is not None, path
        assert f.kind == kind, path
        assert f.asset == asset, path
        assert f.chain.handle == "ethereum"


def test_classify_outside_registry(tmp_path: Path) -> None:
    layout = RegistryLayout(tmp_path)
    assert classify(layout, tmp_path / "README.md") is None
    assert classify(layout, layout.chain_info_path("unknownchain")) is None


def test_rebind_returns_new_value(tmp_path: Path) -> None:
    layout = RegistryLayout(tmp_path)
    f = classify(layout, layout.asset_dir("ethereum", "0xabc"))
    g = f.rebind(tmp_path / "other", asset="0xABC")
    assert g is not f
    assert f.asset == "0xabc"
    assert g.asset == "0xABC"
    assert g.kind == f.kind
