# op-rpc-types

Plain Python types for the OP-specific parts of the OP Stack JSON-RPC surface. The package uses only the standard library.

## What it provides

- `op_rpc_types.genesis` reads the OP-specific fields of a genesis `config` block. All values are optional unsigned 64-bit integers.
  - `OpGenesisInfo` holds the Bedrock block and the hardfork timestamps, from Regolith through Jovian. They are read from camelCase keys such as `bedrockBlock` and `regolithTime`.
  - `OpBaseFeeInfo` holds the EIP-1559 parameters found under the `optimism` key.
  - `OpChainInfo` combines the two. Either part is `None` when it cannot be read.
  - Each class has `try_from`, which raises `ValueError` on bad data, and `extract_from`, which returns `None` instead. Each also has `to_dict`.
- `op_rpc_types.receipt` provides `L1BlockInfo` and `OpTransactionReceiptFields`.
  - These are the extra receipt fields: `l1GasPrice`, `l1GasUsed`, `l1Fee`, `l1FeeScalar`, `l1BaseFeeScalar`, `l1BlobBaseFee`, `l1BlobBaseFeeScalar`, `operatorFeeScalar`, `operatorFeeConstant`, `depositNonce` and `depositReceiptVersion`.
  - Integers are encoded as hex quantities. `l1FeeScalar` is a decimal string.
  - Unset fields are left out when encoding, and unknown keys are ignored when decoding.
  - `OpTransactionReceiptFields` also has `from_json` and `to_json`.
- `op_rpc_types.transaction` provides `OpTransactionFields`, the deposit-specific transaction fields.
  - `mint` and `depositReceiptVersion` are hex quantities.
  - `sourceHash` is a 32-byte hash.
  - `isSystemTx` is a boolean.
- `op_rpc_types.errors` provides `SuperchainDAError`, an `IntEnum` of the supervisor's protocol-specific error codes.
  - `message()` returns the error's text.
  - `from_code()` looks an error up by its code.
  - `to_rpc_error()` builds a JSON-RPC error object.
  - `to_exception()` returns a `SuperchainDAException`.
- `op_rpc_types.quantity` handles Ethereum hex quantities such as `"0x1a"`. It provides `encode_quantity`, `decode_quantity`, `encode_optional_quantity` and `decode_optional_quantity`.

## Install

```
pip install .
pip install ".[test]"   # with pytest
```

## Examples

Extract chain info from genesis config fields:

```python
from op_rpc_types.genesis import OpChainInfo

others = {
    "bedrockBlock": 10,
    "regolithTime": 12,
    "optimism": {"eip1559Denominator": 8, "eip1559DenominatorCanyon": 8},
}
info = OpChainInfo.extract_from(others)
info.genesis_info.bedrock_block            # 10
info.base_fee_info.eip1559_denominator     # 8
```

Round-trip receipt fields:

```python
from op_rpc_types.receipt import OpTransactionReceiptFields

fields = OpTransactionReceiptFields.from_dict({"l1Fee": "0x5bf1ab43d", "l1FeeScalar": "0.678"})
fields.l1_block_info.l1_fee_scalar   # 0.678
fields.to_dict()                     # {"l1Fee": "0x5bf1ab43d", "l1FeeScalar": "0.678"}
```

Map a supervisor error code:

```python
from op_rpc_types.errors import SuperchainDAError

err = SuperchainDAError.from_code(-320501)
err.message()        # "unsupported chain id"
err.to_rpc_error()   # {"code": -320501, "message": "unsupported chain id"}
raise err.to_exception()
```

## What it does not do

The package covers only the OP-specific extra fields. It does not model:

- complete RPC transactions or receipts, meaning the standard Ethereum fields, logs, signatures and transaction envelopes;
- transaction request builders.

It has no JSON-RPC client or server and no command-line tool.

## Tests

```
pytest
```