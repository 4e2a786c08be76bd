import json

import pytest

from regnorm.core.errors import DerivationError
from regnorm.core.fixers import fix_asset_info
from regnorm.core.runtime.context import FixContext
from regnorm.core.runtime.events import DocumentRewrittenEvent

ADDR = "0xdbF03B407c01E7cD3CBea99509d93f8DDDC8C6FB"


def _read(f):
    return json.loads(f.path.read_text(encoding="utf-8"))


def test_all_three_fields_are_fixed_and_unknown_fields_kept(registry) -> None:
    f = registry.asset_info(
        "ethereum",
        ADDR,
        {
            "name": "Token",
            "type": "BEP20",
            "symbol": "TKN",
            "decimals": 18,
            "explorer": "https://example.org/wrong",
            "status": "active",
            "id": ADDR.lower(),
            "note": "x",
            "links": [{"name": "github", "url": "https://github.com/x"}],
        },
    )
    ctx = FixContext(context_id="a1")

    fix_asset_info(f, config=registry.config, context=ctx)

    data = _read(f)
    assert data["type"] == "ERC20"
    assert data["id"] == ADDR
    assert data["explorer"] == f"https://etherscan.io/token/{ADDR}"
    assert data["note"] == "x"
    assert data["decimals"] == 18
    assert data["links"] == [{"name": "github", "url": "https://github.com/x"}]
    assert list(data) == [
        "name",
        "type",
        "symbol",
        "decimals",
        "explorer",
        "status",
        "id",
        "note",
        "links",
    ]

    ev = ctx.events_of(DocumentRewrittenEvent)
    assert len(ev) == 1
    assert ev[0].changed_fields == ["type", "id", "explorer"]


def test_lowercase_type_is_canonicalized(registry) -> None:
    f = registry.asset_info(
        "ethereum",
        ADDR,
        {"type": "erc20", "id": ADDR, "explorer": f"https://etherscan.io/token/{ADDR}"},
    )
    fix_asset_info(f, config=registry.config)
    assert _read(f)["type"] == "ERC20"


def test_explorer_comparison_ignores_case(registry) -> None:
    body = {
        "type": "ERC20",
        "id": ADDR,
        "explorer": f"https://etherscan.io/token/{ADDR.lower()}",
    }
    f = registry.asset_info("ethereum", ADDR, body)
    before = f.path.read_bytes()

    fix_asset_info(f, config=registry.config)

    assert f.path.read_bytes() == before


def test_missing_fields_are_added(registry) -> None:
    f = registry.asset_info("smartchain", ADDR, {"name": "Token"})
    fix_asset_info(f, config=registry.config)
    data = _read(f)
    assert data == {
        "name": "Token",
        "type": "BEP20",
        "id": ADDR,
        "explorer": f"https://bscscan.com/token/{ADDR}",
    }


def test_second_run_changes_nothing(registry) -> None:
    f = registry.asset_info("tron", "1002000", {"type": "trc20", "explorer": "x", "status": "active"})
    fix_asset_info(f, config=registry.config)
    first = f.path.read_bytes()
    ctx = FixContext(context_id="a2")

    fix_asset_info(f, config=registry.config, context=ctx)

    assert f.path.read_bytes() == first
    assert ctx.get_events() == ()
    data = _read(f)
    assert data["type"] == "TRC10"
    assert data["explorer"] == "https://tronscan.io/#/token/1002000"


def test_unsupported_explorer_is_a_hard_error(registry) -> None:
    f = registry.asset_info("cosmos", "uatom", {"type": "native"})
    before = f.path.read_bytes()
    with pytest.raises(DerivationError):
        fix_asset_info(f, config=registry.config)
    assert f.path.read_bytes() == before
