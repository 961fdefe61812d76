"""Tests for the user holder, tokens, adapters and settings."""

from swapmodel import ETHER_ADDRESS, UNLIMITED_ALLOWANCE
from swapmodel.config import Settings, get_settings
from swapmodel.contracts import Adapters, DexConf, Token, User

DAI = "0x6B175474E89094C44Da98b954EedeAC495271d0F"
USER = "0x1111111111111111111111111111111111111111"


def make_tokens() -> list[Token]:
    return [
        Token(address=ETHER_ADDRESS, decimals=18, symbol="ETH", token_type="ETH"),
        Token.model_validate(
            {"address": DAI, "decimals": 18, "symbol": "DAI", "tokenType": "ERC20", "allowance": UNLIMITED_ALLOWANCE}
        ),
    ]


class TestUser:
    """Tests for User."""

    def test_default_network(self):
        """Test the network defaults to mainnet."""
        user = User(USER)
        assert user.network == 1
        assert user.tokens is None

    def test_configured_network(self, monkeypatch):
        """Test the default network comes from settings."""
        monkeypatch.setenv("SWAPMODEL_DEFAULT_NETWORK", "137")
        assert User(USER).network == 137

    def test_explicit_network(self):
        """Test an explicit network wins."""
        assert User(USER, network=56).network == 56

    def test_get_token(self):
        """Test lookup by address or symbol."""
        user = User(USER, tokens=make_tokens())
        assert user.get_token(DAI.lower()).symbol == "DAI"
        assert user.get_token("eth").is_native
        assert user.get_token("USDC") is None
        assert User(USER).get_token("DAI") is None


class TestToken:
    """Tests for Token."""

    def test_token_fields(self):
        """Test token metadata and allowance."""
        eth, dai = make_tokens()
        assert eth.is_native
        assert not dai.is_native
        assert dai.allowance == UNLIMITED_ALLOWANCE
        assert dai.network == 1


class TestAdapters:
    """Tests for adapter configuration."""

    def test_adapters(self):
        """Test augustus plus named adapters."""
        adapters = Adapters.model_validate(
            {
                "augustus": {"exchange": "0xaugustus"},
                "uniswap": {"exchange": "0xadapter", "targetExchange": "0xrouter"},
            }
        )
        assert adapters.augustus.exchange == "0xaugustus"
        uniswap = adapters.get("uniswap")
        assert isinstance(uniswap, DexConf)
        assert uniswap.target_exchange == "0xrouter"
        assert adapters.get("augustus") is adapters.augustus
        assert adapters.get("curve") is None
        assert adapters.names == ["augustus", "uniswap"]


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self, monkeypatch):
        """Test built-in defaults."""
        monkeypatch.delenv("SWAPMODEL_DEBUG", raising=False)
        settings = Settings(_env_file=None)
        assert settings.default_network == 1
        assert settings.partner_fee_bps == 0
        assert settings.referrer is None
        assert settings.debug is False

    def test_cached(self):
        """Test get_settings returns a cached instance."""
        assert get_settings() is get_settings()
