"""Morpho Blue protocol-specific configuration and constants."""

# Morpho Blue contract address (same on Ethereum Mainnet and Base)
MORPHO_BLUE_ADDRESS = "0xBBBBBbbBBb9cC5e90e3b3Af64bdAF62C37EEFFCb"

# Default API URL
MORPHO_API_URL = "https://blue-api.morpho.org/graphql"

# Confirmations awaited after submitting a supply transaction
SUPPLY_CONFIRMATIONS = 1
