"""Protocol-specific implementations.

Currently supported:
- Morpho Blue (src.protocols.morpho)
"""

# Note: We don't import morpho here to avoid circular imports
# Import specific modules as needed:
#   from src.protocols.morpho.abi import MORPHO_BLUE_ABI
#   from src.protocols.morpho.queries import MorphoQueries
