import pytest

from cairoserde.errors import DeserializeError, SerializeError
from cairoserde.starknet import (
    ClassHash,
    ContractAddress,
    EthAddress,
    FeltWrapperSerde,
)


def test_contract_address_cairo_serialize():
    felts = FeltWrapperSerde(ContractAddress).serialize(ContractAddress(1))
    assert felts == [1]


def test_contract_address_cairo_deserialize():
    value = FeltWrapperSerde(ContractAddress).deserialize([1], 0)
    assert value == ContractAddress(1)


def test_class_hash_cairo_serialize():
    felts = FeltWrapperSerde(ClassHash).serialize(ClassHash(1))
    assert felts == [1]


def test_class_hash_cairo_deserialize():
    value = FeltWrapperSerde(ClassHash).deserialize([1], 0)
    assert value == ClassHash(1)


def test_eth_address_cairo_serialize():
    felts = FeltWrapperSerde(EthAddress).serialize(EthAddress(1))
    assert felts == [1]


def test_eth_address_cairo_deserialize():
    value = FeltWrapperSerde(EthAddress).deserialize([1], 0)
    assert value == EthAddress(1)


def test_contract_address_from():
    assert ContractAddress(1).felt == 1
    assert int(ContractAddress(1)) == 1


def test_class_hash_from_hex_string():
    assert ClassHash("0x10") == ClassHash(16)


def test_eth_address_from():
    assert int(EthAddress(1)) == 1


def test_wrappers_of_different_kinds_differ():
    assert ContractAddress(1) != ClassHash(1)


def test_deserialize_buffer_too_short():
    with pytest.raises(DeserializeError) as info:
        FeltWrapperSerde(EthAddress).deserialize([1], 1)
    assert "an EthAddress" in str(info.value)


def test_serialize_wrong_type():
    with pytest.raises(SerializeError):
        FeltWrapperSerde(ContractAddress).serialize(ClassHash(1))


def test_round_trip_at_offset():
    serde = FeltWrapperSerde(ContractAddress)
    felts = [7, *serde.serialize(ContractAddress(0x1234))]
    assert serde.deserialize(felts, 1) == ContractAddress(0x1234)