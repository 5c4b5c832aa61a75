# Docstring for pack_audit/core/columns module
"""
columns.py

Fuzzy column resolution for raw spreadsheet rows.

Real-world exports vary their headers by invisible whitespace, character width
and trailing unit annotations ("回收箱(KG)a1", " 回收箱 (kg) "). An exact header
lookup would silently miss those fields, so every logical field is resolved by
substring containment against the normalized header instead.

Matching rules
--------------
- Every key of the row is normalized once (see `normalizers.normalize_header`).
- Candidate variants are tried in the given order; for each variant, row keys
  are scanned in their original order.
- The first key whose normalized form contains the normalized variant wins.
  A later variant never overrides an earlier hit, even if it would match a
  "better" key.

Public API
----------
- fuzzy_match(row, variants) -> Any | None
- resolve_fields(row, field_variants) -> dict[field, Any | None]
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, TypeVar

from .normalizers import normalize_header


FieldT = TypeVar("FieldT")


def fuzzy_match(row: Mapping[Any, Any], variants: Iterable[str]) -> Any | None:
    """Return the value of the first row key matching one of `variants`, else None."""
    keys = list(row.keys())
    normalized_keys = [normalize_header(key) for key in keys]

    for variant in variants:
        normalized_variant = normalize_header(variant)
        if not normalized_variant:       # "" is contained in every key
            continue
        for key, normalized_key in zip(keys, normalized_keys):
            if normalized_variant in normalized_key:
                return row[key]
    return None


def resolve_fields(
    row: Mapping[Any, Any],
    field_variants: Mapping[FieldT, Iterable[str]],
) -> dict[FieldT, Any | None]:
    """Resolve every logical field of `field_variants` against one row."""
    return {field: fuzzy_match(row, variants) for field, variants in field_variants.items()}
