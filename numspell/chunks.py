"""
Split an integer magnitude into scale groups, least-significant first.

Grouping schemes:
    UNIFORM_1000           1 234 567       → [567@0, 234@1, 1@2]
    VIGESIMAL              same 1000-groups; base 20 applies only below 100
    PAIRED_AFTER_THOUSAND  1,23,45,678     → [678@0, 45@1, 23@2, 1@3]
    CUSTOM_SCALE_LIST      groups follow the ratio between consecutive scale
                           magnitudes (Spanish long scale: mil, millón, billón)

Place values come from the profile's own scale table, so for every scheme
    sum(c.value * place_value(profile, c.scale_index) for c in chunks)
gives back the original magnitude.
"""

from __future__ import annotations

from .exceptions import InternalRangeViolation, ScaleOverflowError
from .models import Chunk, GrammarProfile, GroupingScheme


def place_value(profile: GrammarProfile, scale_index: int) -> int:
    """Multiplier of a chunk at `scale_index` (1 for the units group)."""
    if scale_index == 0:
        return 1
    return profile.scale_for(scale_index).magnitude


def group_limit(profile: GrammarProfile, scale_index: int) -> int:
    """Exclusive upper bound of a chunk value at `scale_index`."""
    top = len(profile.scale_table)
    if scale_index < top:
        return place_value(profile, scale_index + 1) // place_value(profile, scale_index)
    if scale_index > top:
        raise InternalRangeViolation(f"{profile.code}: scale index {scale_index} beyond table")

    if profile.grouping == GroupingScheme.PAIRED_AFTER_THOUSAND:
        return 100
    if profile.grouping == GroupingScheme.CUSTOM_SCALE_LIST and top > 1:
        # The largest scale may count up to the ratio of the two above it
        return place_value(profile, top) // place_value(profile, top - 1)
    return 1000


def decompose(magnitude: int, profile: GrammarProfile) -> list[Chunk]:
    """Decompose a non-negative integer into chunks.

    Args:
        magnitude: e.g. 12345678
        profile: decides the grouping scheme and available scales

    Returns:
        Chunks ordered least-significant first; [Chunk(0, 0)] for zero.

    Raises:
        ScaleOverflowError: If the magnitude does not fit under the largest
            scale the profile defines. Nothing is ever truncated.
    """
    if magnitude < 0:
        raise InternalRangeViolation(f"decompose() expects a magnitude, got {magnitude}")
    if magnitude == 0:
        return [Chunk(value=0, scale_index=0)]

    top = len(profile.scale_table)
    chunks: list[Chunk] = []
    remaining = magnitude
    for scale_index in range(top + 1):
        limit = group_limit(profile, scale_index)
        if scale_index == top and remaining >= limit:
            raise ScaleOverflowError(
                f"Magnitude exceeds the largest scale defined for {profile.code!r}",
                details={
                    "language": profile.code,
                    "largest_scale": profile.scale_table[-1].magnitude,
                    "bits": magnitude.bit_length(),
                },
            )
        remaining, value = divmod(remaining, limit)
        chunks.append(Chunk(value=value, scale_index=scale_index))
        if remaining == 0:
            break
    return chunks


def split_vigesimal(n: int) -> tuple[int, int]:
    """Split 0..99 into a base-20 part and a 0..19 remainder.

    Example:
        split_vigesimal(75) -> (60, 15)
    """
    if not 0 <= n <= 99:
        raise InternalRangeViolation(f"Vigesimal split expects 0..99, got {n}")
    return n // 20 * 20, n % 20
