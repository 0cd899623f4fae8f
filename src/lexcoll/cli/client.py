"""
HTTP client for the LexCollocations API.
"""

import httpx

from lexcoll.config import get_settings


def base_url() -> str:
    return get_settings().api_url


# === Generation ===

async def generate_async(word: str) -> dict:
    async with httpx.AsyncClient(timeout=120) as client:
        r = await client.post(f"{base_url()}/generate", json={"word": word})
        r.raise_for_status()
        return r.json()


# === Dataset ===

def list_words() -> list[str]:
    r = httpx.get(f"{base_url()}/words")
    r.raise_for_status()
    return r.json()["words"]


def get_graph(word: str, senses: list[str] | None = None, top_n: int = 16, layout: bool = True) -> dict:
    params = {"top_n": top_n, "layout": str(layout).lower()}
    if senses:
        params["sense"] = senses
    r = httpx.get(f"{base_url()}/words/{word}/graph", params=params)
    r.raise_for_status()
    return r.json()


def error_detail(e: httpx.HTTPStatusError) -> str:
    """Pull the tagged error message out of an API error response."""
    try:
        detail = e.response.json().get("detail")
    except ValueError:
        return e.response.text
    if isinstance(detail, dict):
        msg = detail.get("error", "")
        if detail.get("details"):
            msg += f" ({detail['details']})"
        return msg
    return str(detail)
