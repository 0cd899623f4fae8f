# tests/conftest.py
import pytest

from lexcoll.core.dataset import Dataset


RUN_ENTRY = {
    "word": "run",
    "senses": [{"id": "run.s1", "label": "motion"}],
    "profiles": [
        {
            "sense_id": "run.s1",
            "top_collocations": [
                {"token": "fast", "freq": 10},
                {"token": "marathon", "freq": 8},
            ],
        }
    ],
    "examples": [{"sentence": "She runs fast.", "sense_id": "run.s1"}],
}


BANK_ENTRY = {
    "word": "bank",
    "senses": [
        {"id": "bank.s1", "label": "finance", "gloss": "money place"},
        {"id": "bank.s2", "label": "river", "gloss": "edge of a river"},
    ],
    "profiles": [
        {
            "sense_id": "bank.s1",
            "top_collocations": [
                {"token": "account", "freq": 50, "pmi": 4.0, "position": "right"},
                {"token": "loan", "freq": 30, "pmi": 3.5, "position": "right"},
                {"token": "steep", "freq": 5, "pmi": 1.0, "position": "left"},
            ],
        },
        {
            "sense_id": "bank.s2",
            "top_collocations": [
                {"token": "river", "freq": 40, "pmi": 6.0, "position": "left"},
                {"token": "steep", "freq": 20, "pmi": 4.8, "position": "left"},
            ],
        },
    ],
    "examples": [
        {"sentence": "I opened an account at the bank.", "sense_id": "bank.s1"},
        {"sentence": "We sat on the river bank.", "sense_id": "bank.s2"},
        {"sentence": "The bank approved the loan.", "sense_id": "bank.s1"},
    ],
}


@pytest.fixture
def dataset():
    return Dataset.from_dict({"words": [RUN_ENTRY, BANK_ENTRY]})
