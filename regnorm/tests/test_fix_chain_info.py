import json
import stat

import pytest

from regnorm.core.errors import RegistryIOError
from regnorm.core.fixers import fix_chain_info
from regnorm.core.runtime.context import FixContext


def test_wrong_type_becomes_coin(registry) -> None:
    f = registry.chain_info("ethereum", {"name": "Ethereum", "type": "wrong", "decimals": 18})
    ctx = FixContext(context_id="c1")

    fix_chain_info(f, config=registry.config, context=ctx)

    data = json.loads(f.path.read_text(encoding="utf-8"))
    assert data == {"name": "Ethereum", "type": "coin", "decimals": 18}
    assert list(data) == ["name", "type", "decimals"]
    assert len(ctx.get_events()) == 1


def test_missing_type_is_added(registry) -> None:
    f = registry.chain_info("tron", {"name": "Tron"})
    fix_chain_info(f, config=registry.config)
    assert json.loads(f.path.read_text(encoding="utf-8"))["type"] == "coin"


def test_correct_descriptor_is_not_written(registry) -> None:
    f = registry.chain_info("ethereum", {"name": "Ethereum", "type": "coin"})
    # Non-canonical spacing would be rewritten by any write.
    f.path.write_text('{"name":"Ethereum","type":"coin"}', encoding="utf-8")
    ctx = FixContext(context_id="c2")

    fix_chain_info(f, config=registry.config, context=ctx)

    assert f.path.read_text(encoding="utf-8") == '{"name":"Ethereum","type":"coin"}'
    assert ctx.get_events() == ()


def test_unparseable_descriptor_is_a_hard_error(registry) -> None:
    f = registry.chain_info("ethereum")
    f.path.write_text("{not json", encoding="utf-8")
    with pytest.raises(RegistryIOError) as ei:
        fix_chain_info(f, config=registry.config)
    assert ei.value.operation == "parse"


def test_rewrite_keeps_file_mode(registry) -> None:
    f = registry.chain_info("ethereum", {"name": "Ethereum", "type": "wrong"})
    f.path.chmod(0o644)

    fix_chain_info(f, config=registry.config)

    assert json.loads(f.path.read_text(encoding="utf-8"))["type"] == "coin"
    assert stat.S_IMODE(f.path.stat().st_mode) == 0o644
