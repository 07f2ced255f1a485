"""Morpho GraphQL API client for vault listings."""

import json
import logging
from typing import Any, Dict, List, Optional

from gql import Client, gql
from gql.transport.aiohttp import AIOHTTPTransport
from gql.transport.exceptions import TransportProtocolError, TransportQueryError

from config.settings import Settings, get_settings
from src.core.constants import DEFAULT_VAULT_PAGE_SIZE
from src.core.exceptions import VaultQueryError, VaultQueryErrorKind
from src.core.models import VaultRecord
from src.data.clients.morpho.parser import MorphoParser
from src.protocols.morpho.queries import MorphoQueries

logger = logging.getLogger(__name__)

NO_DATA_MESSAGE = "No data returned from the GraphQL API"


class MorphoVaultClient:
    """GraphQL client for the Morpho vaults API."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self._parser = MorphoParser()

    async def _execute(self, query: str, variables: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Execute a GraphQL query and return its ``data`` member.

        A body with ``"data": null`` yields ``None``. Errors in the body raise
        ``TransportQueryError``.
        """
        # Fresh transport and client per request; nothing is shared between calls
        transport = AIOHTTPTransport(
            url=self.settings.morpho_graphql_url,
            headers={"Content-Type": "application/json"},
        )
        client = Client(transport=transport, fetch_schema_from_transport=False)
        async with client:
            result = await transport.execute(gql(query), variable_values=variables)

        if result.errors:
            raise TransportQueryError(
                str(result.errors[0]),
                errors=result.errors,
                data=result.data,
                extensions=result.extensions,
            )
        return result.data

    async def fetch_vaults(
        self,
        first: int = DEFAULT_VAULT_PAGE_SIZE,
        skip: int = 0,
    ) -> List[VaultRecord]:
        """Fetch a page of vaults from the Morpho API.

        Args:
            first: Maximum number of vaults to fetch (the API may cap it)
            skip: Number of vaults to skip (for pagination)

        Returns:
            Vault records in response order

        Raises:
            VaultQueryError: on transport failure, GraphQL errors, or a
                response without the expected data
        """
        try:
            result = await self._execute(
                MorphoQueries.FETCH_VAULTS_QUERY,
                {"first": first, "skip": skip},
            )
            if not result:
                raise VaultQueryError(VaultQueryErrorKind.SCHEMA_MISMATCH, NO_DATA_MESSAGE)

            vaults = result.get("vaults")
            if not isinstance(vaults, dict) or vaults.get("items") is None:
                raise VaultQueryError(
                    VaultQueryErrorKind.SCHEMA_MISMATCH,
                    "Response is missing vaults.items",
                )

            try:
                return self._parser.parse_vaults(vaults["items"])
            except (KeyError, TypeError) as e:
                raise VaultQueryError(
                    VaultQueryErrorKind.SCHEMA_MISMATCH,
                    f"Malformed vault item: {e!r}",
                    e,
                ) from e

        except VaultQueryError as e:
            logger.error(f"{e}")
            raise

        except TransportQueryError as e:
            errors = e.errors if e.errors else [{"message": str(e)}]
            logger.error(f"Failed to fetch vault list: GraphQL errors: {errors}")
            raise VaultQueryError(
                VaultQueryErrorKind.REMOTE_QUERY,
                f"GraphQL errors: {json.dumps(errors, default=str)}",
                e,
            ) from e

        except TransportProtocolError as e:
            logger.error(f"Failed to fetch vault list: {e}")
            raise VaultQueryError(
                VaultQueryErrorKind.SCHEMA_MISMATCH,
                f"{NO_DATA_MESSAGE}: {e}",
                e,
            ) from e

        except Exception as e:
            logger.error(f"Failed to fetch vault list: {e}")
            raise VaultQueryError(VaultQueryErrorKind.TRANSPORT, str(e), e) from e


async def fetch_vaults(
    first: int = DEFAULT_VAULT_PAGE_SIZE,
    skip: int = 0,
    *,
    settings: Optional[Settings] = None,
) -> List[VaultRecord]:
    """Fetch a page of vaults with a one-off client."""
    return await MorphoVaultClient(settings).fetch_vaults(first=first, skip=skip)
