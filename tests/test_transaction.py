import json

import pytest

from op_rpc_types.transaction import OpTransactionFields

SOURCE_HASH = "0x04e9a69416471ead93b02f0c279ab11ca0b635db5c1726a56faf22623bafde52"

RPC_DEPOSIT = {
    "blockHash": "0x9d86bb313ebeedf4f9f82bf8a19b426be656a365648a7c089b618771311db9f9",
    "blockNumber": "0x798ad0b",
    "hash": "0xbc9329afac05556497441e2b3ee4c5d4da7ca0b2a4c212c212d0739e94a24df9",
    "transactionIndex": "0x0",
    "type": "0x7e",
    "nonce": "0x152ea95",
    "mint": "0x0",
    "sourceHash": SOURCE_HASH,
    "gas": "0xf4240",
    "from": "0xdeaddeaddeaddeaddeaddeaddeaddeaddead0001",
    "to": "0x4200000000000000000000000000000000000015",
    "depositReceiptVersion": "0x1",
    "value": "0x0",
    "gasPrice": "0x0",
}


def test_read_deposit_fields():
    op_fields = OpTransactionFields.from_dict(RPC_DEPOSIT)
    assert op_fields.mint == 0
    assert op_fields.source_hash == bytes.fromhex(SOURCE_HASH[2:])
    assert op_fields.is_system_tx is None
    assert op_fields.deposit_receipt_version == 1


def test_deposit_fields_serialize_to_source_subset():
    op_fields = OpTransactionFields.from_dict(RPC_DEPOSIT)
    expected = {key: RPC_DEPOSIT[key] for key in ("mint", "sourceHash", "depositReceiptVersion")}
    assert op_fields.to_dict() == expected


def test_empty_fields_serialize_to_empty_object():
    assert OpTransactionFields().to_dict() == {}
    assert OpTransactionFields.from_dict({}) == OpTransactionFields()


def test_json_round_trip():
    op_fields = OpTransactionFields(
        mint=2**128 - 1,
        source_hash=bytes(range(32)),
        is_system_tx=True,
        deposit_receipt_version=2**64 - 1,
    )
    assert OpTransactionFields.from_json(op_fields.to_json()) == op_fields


def test_is_system_tx_serialized_as_bool():
    encoded = json.loads(OpTransactionFields(is_system_tx=False).to_json())
    assert encoded == {"isSystemTx": False}


def test_source_hash_without_prefix_and_uppercase():
    op_fields = OpTransactionFields.from_dict({"sourceHash": SOURCE_HASH[2:].upper()})
    assert op_fields.to_dict()["sourceHash"] == SOURCE_HASH


@pytest.mark.parametrize("bad", ["0x1234", SOURCE_HASH + "00", "0x" + "zz" * 32, 12])
def test_bad_source_hash_rejected(bad):
    with pytest.raises(ValueError):
        OpTransactionFields.from_dict({"sourceHash": bad})


def test_bad_is_system_tx_rejected():
    with pytest.raises(ValueError):
        OpTransactionFields.from_dict({"isSystemTx": "true"})


def test_mint_out_of_range_rejected():
    with pytest.raises(ValueError):
        OpTransactionFields.from_dict({"mint": hex(2**128)})


def test_deposit_receipt_version_out_of_range_rejected():
    with pytest.raises(ValueError):
        OpTransactionFields.from_dict({"depositReceiptVersion": hex(2**64)})


def test_constructor_rejects_short_hash():
    with pytest.raises(ValueError):
        OpTransactionFields(source_hash=b"\x00" * 31)


def test_malformed_json_rejected():
    with pytest.raises(ValueError):
        OpTransactionFields.from_json("[")