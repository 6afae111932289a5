from account.balances import get_token_balances
from core.base_types import Address

OWNER = "0x000000000000000000000000000000000000beef"
USDC = "0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48"
DAI = "0x6b175474e89094c44da98b954eedeac495271d0f"
TOKENS = {"USDC": USDC, "DAI": DAI}


def _setup(chain):
    chain.eth_balances[OWNER] = 15 * 10**17
    chain.add_token(USDC, "USDC", 6)
    chain.add_token(DAI, "DAI", 18)
    chain.set_token_balance(USDC, OWNER, 42_000_000)
    chain.set_token_balance(DAI, OWNER, 3 * 10**18)


def test_eth_and_token_balances_in_request_order(fake_chain):
    _setup(fake_chain)
    balances = get_token_balances(fake_chain, Address(OWNER), ["ETH", "usdc"], TOKENS)
    assert balances == [("ETH", 1.5), ("USDC", 42.0)]


def test_empty_symbols_checks_every_mapped_token(fake_chain):
    _setup(fake_chain)
    balances = get_token_balances(fake_chain, Address(OWNER), [], TOKENS)
    assert balances == [("USDC", 42.0), ("DAI", 3.0)]


def test_unknown_symbol_reports_zero(fake_chain):
    _setup(fake_chain)
    balances = get_token_balances(fake_chain, Address(OWNER), ["PEPE"], TOKENS)
    assert balances == [("PEPE", 0.0)]
    assert fake_chain.calls == []
