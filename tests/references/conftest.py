"""Shared fixtures for reference extraction tests."""

from __future__ import annotations

import pytest

from src.references._models import ReferenceSettings


@pytest.fixture()
def reference_settings() -> ReferenceSettings:
    """Default settings for tests."""
    return ReferenceSettings()


@pytest.fixture()
def sample_answer_text() -> str:
    """An assistant answer citing one instrument of every recognised type."""
    return (
        "Driving without a license is penalised under RA 4136 Section 31. "
        "The fine schedule was revised by Administrative Order No. 2014-01, "
        "implemented through LTO Memorandum 2023-045 and LTO Circular 15-2020. "
        "In Metro Manila, MMDA Resolution No. 16-01 also applies. "
        "See also Republic Act 10930."
    )


@pytest.fixture()
def citation_free_corpus() -> list[str]:
    """Texts that look legal but must not produce references."""
    return [
        "",
        "no citations here",
        "Please renew your registration before it expires.",
        "ORDER now! Administration fees apply.",
        "The RAM module, LTOs and cities are unrelated.",
        "Order No 5 lacks the dot.",
        "LTO Circular without a number",
        "🚗 ✅ ñandú ümlaut",
        "RA \u0664\u0661\u0663\u0666 and City Resolution \u212a-1",
        "Order No. \u0967\u0968 and LTO Circular \uff11-\uff12",
    ]


@pytest.fixture()
def property_corpus(sample_answer_text: str) -> list[str]:
    """Mixed texts for invariant checks over every parse result."""
    return [
        sample_answer_text,
        "Under RA 4136 Section 56, and also RA 4136 Section 56 again,",
        "See Administrative Order No. 2021-01 and LTO Circular 15-2020.",
        "ra 4136 section 56 vs RA 4136 Section 56 vs Republic Act 4136 Section 56",
        "LTO Resolution No. AB-12 and City Resolution 2019-7 and Municipal Resolution X",
        "Order No. 7, Order No. 7, Order No. 8",
        "RA 4136 Article 2 then RA 4136 Chapter 3 then RA 4136",
        "**RA 10054** (helmet law) — see *LTO Memo 2012-15*.\n\n- Order No. 12\n",
        "RA 4136 Section ",
        "no citations here",
        "",
    ]
