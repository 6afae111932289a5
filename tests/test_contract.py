import pytest

from chain.contract import call_contract, call_single, encode_call, selector
from chain.errors import ChainError
from core.base_types import Address

TOKEN = "0x6b175474e89094c44da98b954eedeac495271d0f"


def test_selectors_match_known_values():
    assert selector("balanceOf(address)") == bytes.fromhex("70a08231")
    assert selector("decimals()") == bytes.fromhex("313ce567")
    assert selector("getReserves()") == bytes.fromhex("0902f1ac")


def test_encode_call_appends_abi_args():
    owner = Address("0x000000000000000000000000000000000000dead")
    data = encode_call("balanceOf(address)", ["address"], [owner.checksum])
    assert len(data) == 4 + 32
    assert data[-2:] == bytes.fromhex("dead")


def test_encode_call_length_mismatch():
    with pytest.raises(ValueError, match="same length"):
        encode_call("balanceOf(address)", ["address"], [])


def test_call_contract_decodes_tuple(fake_chain):
    fake_chain.on_call(TOKEN, "decimals()", ["uint8"], [18])
    assert call_contract(fake_chain, Address(TOKEN), "decimals()", ["uint8"]) == (18,)
    assert call_single(fake_chain, Address(TOKEN), "decimals()", "uint8") == 18


def test_short_return_data_raises_chain_error(fake_chain):
    fake_chain.on_raw(TOKEN, "decimals()", b"")
    with pytest.raises(ChainError, match="could not decode decimals"):
        call_single(fake_chain, Address(TOKEN), "decimals()", "uint8")
