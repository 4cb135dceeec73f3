import json
from pathlib import Path

import pytest
from eth_utils import keccak

from conftest import ABI_DIR, APPROVAL_T0, TRANSFER_T0
from keyed_events.abi_events import Abi, get_event_topic0, get_events_from_abi, load_abi, normalize_type


def test_load_abi_keeps_only_events(erc20_abi: Abi) -> None:
    assert [e.name for e in erc20_abi.events] == ["Approval", "Transfer"]


def test_erc20_selectors(erc20_abi: Abi) -> None:
    approval, transfer = erc20_abi.events
    assert transfer.signature == "Transfer(address,address,uint256)"
    assert get_event_topic0(transfer) == TRANSFER_T0
    assert get_event_topic0(approval) == APPROVAL_T0
    assert transfer.selector == bytes.fromhex(TRANSFER_T0[2:])


def test_find_event(erc20_abi: Abi) -> None:
    assert erc20_abi.find_event(bytes.fromhex(TRANSFER_T0[2:])).name == "Transfer"
    assert erc20_abi.find_event(b"\x00" * 32) is None


def test_tuple_signature_and_struct_names(orders_abi: Abi) -> None:
    order_filled, tagged = orders_abi.events
    assert order_filled.signature == "OrderFilled((address,uint256),bytes32,(bool,string),(int128,uint64)[])"
    assert tagged.signature == "Tagged(string,int24,bytes,uint8[3],function)"

    order, _, meta, fills = order_filled.inputs
    assert order.struct_name == "Exchange.Order"
    assert meta.struct_name is None
    assert fills.struct_name == "Exchange.Fill"
    assert [p.name for p in order_filled.indexed_inputs] == ["orderHash"]
    assert [p.name for p in order_filled.body_inputs] == ["order", "meta", "fills"]


def test_load_abi_from_artifact(tmp_path: Path) -> None:
    entries = json.loads((ABI_DIR / "erc20.json").read_text())
    artifact = tmp_path / "Token.json"
    artifact.write_text(json.dumps({"contractName": "Token", "abi": entries}))

    assert len(load_abi(artifact).events) == 2
    assert len(load_abi(str(artifact)).events) == 2


def test_load_abi_rejects_unknown_shape(tmp_path: Path) -> None:
    bad = tmp_path / "bad.json"
    bad.write_text(json.dumps({"contracts": {}}))
    with pytest.raises(ValueError):
        load_abi(bad)

    bad.write_text("not json")
    with pytest.raises(ValueError):
        load_abi(bad)


def test_unnamed_params_keep_empty_name() -> None:
    events = get_events_from_abi(
        [{"type": "event", "name": "Anon", "inputs": [{"type": "uint256", "indexed": False}]}]
    )
    assert events[0].inputs[0].name == ""
    assert events[0].anonymous is False


def test_type_aliases_hash_as_canonical_types() -> None:
    assert normalize_type("uint") == "uint256"
    assert normalize_type("int[2][]") == "int256[2][]"
    assert normalize_type("uint8") == "uint8"
    assert normalize_type("bytes") == "bytes"

    events = get_events_from_abi(
        [
            {
                "type": "event",
                "name": "Moved",
                "inputs": [
                    {"name": "amount", "type": "uint", "indexed": False},
                    {"name": "deltas", "type": "int[]", "indexed": False},
                    {"name": "pair", "type": "tuple", "indexed": False, "components": [{"name": "x", "type": "uint"}]},
                ],
            }
        ]
    )
    assert events[0].signature == "Moved(uint256,int256[],(uint256))"
    assert events[0].selector == keccak(text="Moved(uint256,int256[],(uint256))")
