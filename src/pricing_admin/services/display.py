"""
Display helpers for variants and price tiers.

Turns open-ended variant option bags into plain-English strings and builds
the tier tables shown in the UI and exported to CSV.
"""
import re

import pandas as pd

from ..store import Variant, PriceTier

VALUE_MAPPINGS = {
    'yes': 'Yes',
    'no': 'No',
    'true': 'Yes',
    'false': 'No',
    'included': 'Included',
    'standard': 'Standard',
    'kraft': 'Kraft',
    'white': 'White',
    'black': 'Black',
}

TIER_COLUMNS = ['ID', 'Min Qty', 'Unit Price']


def format_key_to_words(key: str) -> str:
    """Convert a camelCase or snake_case option key to readable words."""
    words = re.sub(r'([A-Z])', r' \1', key)
    words = words.replace('_', ' ')
    words = words[:1].upper() + words[1:]
    return words.strip()


def format_value(value: str) -> str:
    """Map common option values to a display form."""
    if re.fullmatch(r'\d+', value):
        return f"{value} Colors"
    return VALUE_MAPPINGS.get(value.lower(), value)


def format_variant_options(variant: Variant) -> str:
    """Options as ``Key: Value`` pairs, skipping unset values."""
    parts = [
        f"{format_key_to_words(key)}: {format_value(value)}"
        for key, value in variant.options.items()
        if value is not None
    ]
    return " · ".join(parts)


def variant_display_string(variant: Variant) -> str:
    return f"{variant.sku} — {format_variant_options(variant)}"


def price_tiers_frame(tiers: list[PriceTier]) -> pd.DataFrame:
    """Tabulate tiers in the order given."""
    return pd.DataFrame(
        [{'ID': t.id, 'Min Qty': t.min_qty, 'Unit Price': t.price} for t in tiers],
        columns=TIER_COLUMNS,
    )
