"""
Shared dependencies for routes.
"""

from functools import lru_cache
from typing import Callable

from openai import OpenAI

from lexcoll.config import Settings, get_settings
from lexcoll.core.dataset import Dataset
from lexcoll.core.generate import make_client


ClientFactory = Callable[[Settings], OpenAI]


@lru_cache(maxsize=1)
def _load_dataset(path: str | None) -> Dataset:
    return Dataset.load(path)


def get_dataset() -> Dataset:
    path = get_settings().dataset_path
    return _load_dataset(str(path) if path else None)


def get_client_factory() -> ClientFactory:
    return make_client

