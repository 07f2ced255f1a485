"""Generic constants for DeFi protocol calculations.

These constants are protocol-agnostic and can be used across different protocols.
"""

# Precision constants
WAD = 10**18  # Standard 18 decimal precision (used in Morpho, Aave, etc.)

# Morpho `supply` takes exactly one non-zero leg; the other is passed as zero
ZERO_SHARES = 0

# Auxiliary callback data for protocol hooks (unused by plain deposits)
EMPTY_CALLDATA = b""

# Default page size for vault listing
DEFAULT_VAULT_PAGE_SIZE = 1000
