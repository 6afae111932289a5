import pytest
from eth_account import Account

import main


def test_solve_reports_opportunity(capsys):
    main.main(["solve", "100", "100", "0.997", "110", "100", "0.997"])
    out = capsys.readouterr().out.strip()
    assert out.startswith("Arbitrage: withdraw X from pool A, deposit into pool B")
    assert "optimal input 4.26" in out


def test_solve_reports_no_opportunity(capsys):
    main.main(["solve", "1000", "500", "0.997", "1000", "500", "0.997"])
    assert capsys.readouterr().out.strip() == "No arbitrage opportunity found"


def test_solve_invalid_reserve_is_not_fatal(capsys):
    main.main(["solve", "0", "500", "0.997", "1000", "500", "0.997"])
    out = capsys.readouterr().out.strip()
    assert out == "Rejected computation: reserve_x must be positive"


def test_unknown_network_exits_with_code_2(capsys):
    with pytest.raises(SystemExit) as exc:
        main.main(["--network", "dogechain", "block"])
    assert exc.value.code == 2
    assert "Unknown network" in capsys.readouterr().err


def test_block_command_prints_latest_block(monkeypatch, capsys):
    monkeypatch.setenv("RPC_URL_ETHEREUM", "https://rpc.example")

    def fake_get_block(self, block="latest", full=False):
        return {"number": "0x2a", "hash": "0xabc", "timestamp": "0x0", "transactions": []}

    monkeypatch.setattr("chain.client.ChainClient.get_block", fake_get_block)

    main.main(["block"])

    assert "Latest block: 42" in capsys.readouterr().out


def test_resolve_token_by_symbol_and_address():
    usdc = main._resolve_token("usdc")
    assert usdc == "0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48"
    assert main._resolve_token("0x000000000000000000000000000000000000dead") == (
        "0x000000000000000000000000000000000000dead"
    )
    with pytest.raises(ValueError, match="unknown token symbol"):
        main._resolve_token("PEPE")


def test_resolve_owner_derives_address_from_private_key(monkeypatch):
    account = Account.create()
    monkeypatch.setenv("PRIVATE_KEY", account.key.hex())
    assert main._resolve_owner(None) == account.address


def test_resolve_owner_prefers_explicit_address(monkeypatch):
    monkeypatch.delenv("PRIVATE_KEY", raising=False)
    owner = main._resolve_owner("0x000000000000000000000000000000000000dead")
    assert owner == "0x000000000000000000000000000000000000dead"
