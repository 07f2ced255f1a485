"""GraphQL queries for Morpho Blue API."""


class MorphoQueries:
    """GraphQL query definitions for Morpho Blue API."""

    # Fetch a page of vaults with asset, yield, liquidity and chain details
    FETCH_VAULTS_QUERY = """
    query FetchVaults($first: Int!, $skip: Int!) {
        vaults(first: $first, skip: $skip) {
            items {
                address
                name
                symbol
                whitelisted
                asset {
                    address
                    name
                    symbol
                    decimals
                }
                dailyApys {
                    apy
                }
                warnings {
                    level
                }
                liquidity {
                    underlying
                    usd
                }
                chain {
                    id
                    network
                    currency
                }
            }
        }
    }
    """
