"""Fixers: idempotent passes that bring registry files in line with canonical values.

Each fixer takes an AssetFile and returns the AssetFile the caller must keep
using. Only fix_address_checksum ever returns a different one.
"""

from .asset_info import fix_asset_info
from .chain_info import fix_chain_info
from .checksum import fix_address_checksum
from .json_format import fix_json
from .logo import fix_logo
from .service import FIXERS_BY_KIND, FixerService
from .token_list import fix_token_list

__all__ = [
    "fix_address_checksum",
    "fix_logo",
    "fix_chain_info",
    "fix_asset_info",
    "fix_token_list",
    "fix_json",
    "FIXERS_BY_KIND",
    "FixerService",
]
