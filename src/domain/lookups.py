"""
Shared lookup tables for writer roles, rights-chain vocabulary and PROs.

These tables are fixed business vocabulary, not configuration.
"""

from __future__ import annotations

from typing import Final

# --- Writer Roles ---

WRITER_ROLES: Final[tuple[tuple[str, str], ...]] = (
    ("CA", "Composer/Author"),
    ("C", "Composer"),
    ("A", "Author/Lyricist"),
    ("AR", "Arranger"),
    ("AD", "Adapter"),
    ("TR", "Translator"),
)

ROLE_LABELS: Final[dict[str, str]] = dict(WRITER_ROLES)

DEFAULT_ROLE_CODE: Final = "CA"
DEFAULT_ROLE_LABEL: Final = "Composer/Author"


def role_label(code: str | None) -> str:
    """Resolve a role code to its label, falling back to Composer/Author."""
    if code is None:
        return DEFAULT_ROLE_LABEL
    return ROLE_LABELS.get(code, DEFAULT_ROLE_LABEL)


# --- Rights Chain Vocabulary ---

ORIGINAL_PUBLISHER: Final = "Original Publisher"

# Only a single global territory is ever emitted.
WORLD_TERRITORY: Final = "World"

# Controlled writers: publisher and PRO each collect half of performance income.
PUBLISHER_PERFORMANCE_RATIO: Final = 0.5

# System publisher used when a controlled writer has no explicit publisher.
SYSTEM_PUBLISHER_ID: Final = "00000000-0000-0000-0000-000000000001"

# --- Performance Rights Organizations ---

PRO_LIST: Final[tuple[str, ...]] = (
    "PRS",
    "ASCAP",
    "BMI",
    "SOCAN",
    "GEMA",
    "SACEM",
    "SIAE",
    "SGAE",
    "JASRAC",
    "APRA",
    "IMRO",
    "MCPS",
    "SESAC",
    "KOMCA",
    "SABAM",
    "SUISA",
    "STIM",
    "BUMA",
    "TONO",
    "KODA",
    "TEOSTO",
    "AKM",
    "CASH",
    "SAMRO",
    "Other",
)
