"""Deterministic result-tree generators for performance benchmarks.

All generators produce fixed, reproducible documents. No random values.
Three tiers: 100, 1,000 and 5,000 reaction records, each with three
condition sets sharing a small vocabulary of solvents and authors, the
shape where canonicalization pays off.
"""

from __future__ import annotations

import pytest

_SOLVENTS = ["water", "ethanol", "toluene", "dichloromethane", "tetrahydrofuran"]
_JOURNALS = ["Tetrahedron Letters", "Journal of Organic Chemistry", "Organic Letters"]


def generate_reactions(num_records: int, details: int = 3) -> str:
    """Generate a reactions response with ``details`` condition sets each."""
    parts = ["<xf><result><context>reactions</context></result><reactions>"]
    for i in range(num_records):
        parts.append(f"<reaction><RX><RX.ID>{i}</RX.ID></RX>")
        for j in range(details):
            solvent = _SOLVENTS[(i + j) % len(_SOLVENTS)]
            parts.append(
                "<RXD>"
                f"<RXD.YD>{(i * 7 + j) % 100}</RXD.YD>"
                f"<RXD.SOL>{solvent}</RXD.SOL>"
                "<CIT><CIT01>"
                f"<CIT.JT>{_JOURNALS[i % len(_JOURNALS)]}</CIT.JT>"
                f"<CIT.PY>{1990 + i % 30}</CIT.PY>"
                "</CIT01></CIT>"
                "</RXD>"
            )
        parts.append("</reaction>")
    parts.append("</reactions></xf>")
    return "".join(parts)


# --- Fixtures for each size tier ---


@pytest.fixture(scope="session")
def reactions_100() -> str:
    """100 reactions x 3 condition sets."""
    return generate_reactions(100)


@pytest.fixture(scope="session")
def reactions_1000() -> str:
    """1,000 reactions x 3 condition sets."""
    return generate_reactions(1000)


@pytest.fixture(scope="session")
def reactions_5000() -> str:
    """5,000 reactions x 3 condition sets."""
    return generate_reactions(5000)
