"""Unit tests for MorphoVaultClient."""

import pytest
import aiohttp
from unittest.mock import AsyncMock, patch

from gql.transport.exceptions import TransportProtocolError, TransportQueryError

from src.core.exceptions import VaultQueryError, VaultQueryErrorKind
from src.core.models import VaultRecord
from src.data.clients.morpho import MorphoVaultClient, fetch_vaults
from src.protocols.morpho.queries import MorphoQueries


class TestMorphoVaultClient:
    """Tests for MorphoVaultClient.fetch_vaults."""

    @pytest.fixture
    def client(self, settings):
        """Create a test client."""
        return MorphoVaultClient(settings)

    @pytest.fixture
    def vaults_response(self, vault_item):
        second = dict(vault_item, address="0x8eB67A509616cd6A7c1B3c8C21D48FF57df3d458", name="Gauntlet USDC Core")
        return {"vaults": {"items": [vault_item, second]}}

    def test_uses_configured_settings(self, client, settings):
        assert client.settings is settings

    @pytest.mark.asyncio
    async def test_fetch_vaults(self, client, vaults_response):
        """Test fetching vaults returns every item in response order."""
        with patch.object(client, "_execute", new_callable=AsyncMock) as mock_execute:
            mock_execute.return_value = vaults_response

            vaults = await client.fetch_vaults(first=100, skip=0)

            assert len(vaults) == 2
            assert all(isinstance(v, VaultRecord) for v in vaults)
            assert [v.name for v in vaults] == ["Steakhouse USDC", "Gauntlet USDC Core"]
            mock_execute.assert_called_once_with(
                MorphoQueries.FETCH_VAULTS_QUERY,
                {"first": 100, "skip": 0},
            )

    @pytest.mark.asyncio
    async def test_fetch_vaults_copies_fields(self, client, vault_item):
        with patch.object(client, "_execute", new_callable=AsyncMock) as mock_execute:
            mock_execute.return_value = {"vaults": {"items": [vault_item]}}

            vault = (await client.fetch_vaults())[0]

            assert vault.address == vault_item["address"]
            assert vault.whitelisted is True
            assert vault.asset.decimals == 6
            assert [d.apy for d in vault.daily_apys] == [0.0523, 0.0498]
            assert vault.warning_levels == ("YELLOW",)
            assert vault.liquidity.usd == 125010000.25
            assert vault.chain.id == 1

    @pytest.mark.asyncio
    async def test_fetch_vaults_default_page(self, client):
        with patch.object(client, "_execute", new_callable=AsyncMock) as mock_execute:
            mock_execute.return_value = {"vaults": {"items": []}}

            vaults = await client.fetch_vaults()

            assert vaults == []
            mock_execute.assert_called_once_with(
                MorphoQueries.FETCH_VAULTS_QUERY,
                {"first": 1000, "skip": 0},
            )

    @pytest.mark.asyncio
    async def test_fetch_vaults_passes_offsets_through(self, client):
        with patch.object(client, "_execute", new_callable=AsyncMock) as mock_execute:
            mock_execute.return_value = {"vaults": {"items": []}}

            await client.fetch_vaults(first=50000, skip=2500)

            assert mock_execute.call_args.args[1] == {"first": 50000, "skip": 2500}

    @pytest.mark.asyncio
    async def test_fetch_vaults_repeatable(self, client, vaults_response):
        """Repeating the same read against unchanged data yields equal results."""
        with patch.object(client, "_execute", new_callable=AsyncMock) as mock_execute:
            mock_execute.return_value = vaults_response

            first = await client.fetch_vaults(first=10)
            second = await client.fetch_vaults(first=10)

            assert first == second

    @pytest.mark.asyncio
    async def test_graphql_errors(self, client):
        """Errors in the body are reported even though HTTP succeeded."""
        errors = [{"message": "Something went wrong"}]

        with patch.object(client, "_execute", new_callable=AsyncMock) as mock_execute:
            mock_execute.side_effect = TransportQueryError(str(errors[0]), errors=errors)

            with pytest.raises(VaultQueryError, match="Something went wrong") as exc_info:
                await client.fetch_vaults(100, 0)

        assert exc_info.value.kind == VaultQueryErrorKind.REMOTE_QUERY
        assert str(exc_info.value).startswith("Failed to fetch vault list: GraphQL errors: ")
        assert '"message": "Something went wrong"' in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, TransportQueryError)

    @pytest.mark.asyncio
    async def test_no_data_from_transport(self, client):
        with patch.object(client, "_execute", new_callable=AsyncMock) as mock_execute:
            mock_execute.side_effect = TransportProtocolError('No "data" or "errors" keys in answer')

            with pytest.raises(VaultQueryError, match="No data returned") as exc_info:
                await client.fetch_vaults()

        assert exc_info.value.kind == VaultQueryErrorKind.SCHEMA_MISMATCH

    @pytest.mark.asyncio
    async def test_empty_data(self, client):
        with patch.object(client, "_execute", new_callable=AsyncMock) as mock_execute:
            mock_execute.return_value = {}

            with pytest.raises(VaultQueryError, match="No data returned") as exc_info:
                await client.fetch_vaults()

        assert exc_info.value.kind == VaultQueryErrorKind.SCHEMA_MISMATCH

    @pytest.mark.asyncio
    async def test_null_data(self, client):
        with patch.object(client, "_execute", new_callable=AsyncMock) as mock_execute:
            mock_execute.return_value = None

            with pytest.raises(VaultQueryError, match="No data returned") as exc_info:
                await client.fetch_vaults()

        assert exc_info.value.kind == VaultQueryErrorKind.SCHEMA_MISMATCH
        assert str(exc_info.value) == "Failed to fetch vault list: No data returned from the GraphQL API"

    @pytest.mark.asyncio
    async def test_missing_items(self, client):
        with patch.object(client, "_execute", new_callable=AsyncMock) as mock_execute:
            mock_execute.return_value = {"vaults": None}

            with pytest.raises(VaultQueryError, match="vaults.items") as exc_info:
                await client.fetch_vaults()

        assert exc_info.value.kind == VaultQueryErrorKind.SCHEMA_MISMATCH

    @pytest.mark.asyncio
    async def test_malformed_item(self, client, vault_item):
        del vault_item["chain"]

        with patch.object(client, "_execute", new_callable=AsyncMock) as mock_execute:
            mock_execute.return_value = {"vaults": {"items": [vault_item]}}

            with pytest.raises(VaultQueryError, match="Malformed vault item") as exc_info:
                await client.fetch_vaults()

        assert exc_info.value.kind == VaultQueryErrorKind.SCHEMA_MISMATCH
        assert isinstance(exc_info.value.__cause__, KeyError)

    @pytest.mark.asyncio
    async def test_transport_failure(self, client):
        with patch.object(client, "_execute", new_callable=AsyncMock) as mock_execute:
            mock_execute.side_effect = aiohttp.ClientConnectionError("Connection refused")

            with pytest.raises(VaultQueryError, match="Connection refused") as exc_info:
                await client.fetch_vaults()

        assert exc_info.value.kind == VaultQueryErrorKind.TRANSPORT
        assert str(exc_info.value) == "Failed to fetch vault list: Connection refused"


class TestFetchVaultsFunction:
    """Tests for the module-level fetch_vaults helper."""

    @pytest.mark.asyncio
    async def test_fetch_vaults_with_settings(self, settings, vault_item):
        with patch.object(MorphoVaultClient, "_execute", new_callable=AsyncMock) as mock_execute:
            mock_execute.return_value = {"vaults": {"items": [vault_item]}}

            vaults = await fetch_vaults(5, 0, settings=settings)

            assert len(vaults) == 1
            assert vaults[0].symbol == "steakUSDC"
