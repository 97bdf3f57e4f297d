from __future__ import annotations

import pytest

from quiz_author.data_models import QuizRecord


@pytest.fixture
def khmer_bulk_text() -> str:
    """Two numbered Khmer questions separated by a blank line."""
    return (
        "1. តើមូលធននិយមជាអ្វី?\n"
        "ក. ប្រព័ន្ធមួយ (ចម្លើយត្រឹមត្រូវ)\n"
        "ខ. ប្រព័ន្ធពីរ\n"
        "\n"
        "2. តើរដ្ឋធានីកម្ពុជាជាអ្វី?\n"
        "ក. សៀមរាប\n"
        "ខ. ភ្នំពេញ (ចម្លើយត្រឹមត្រូវ)\n"
        "គ. បាត់ដំបង\n"
        "ឃ. កំពត\n"
    )


@pytest.fixture
def sample_record() -> QuizRecord:
    return QuizRecord(
        subject="Physics",
        prompt="What is the unit of force?",
        options=["Joule", "Newton", "Watt", "Pascal"],
        correct_index=1,
    )
