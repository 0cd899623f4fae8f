"""
Generation route: /api/generate
"""

import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from lexcoll.config import Settings
from lexcoll.core.generate import GenerationError, generate_entry
from lexcoll.server.deps import ClientFactory, get_client_factory, get_settings


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/generate", tags=["generate"])


class GenerateRequest(BaseModel):
    # validated by hand so a bad word is a 400, not a 422
    word: Any = None


def _error(status: int, message: str, kind: str, retryable: bool = False) -> HTTPException:
    return HTTPException(
        status_code=status,
        detail={"error": message, "kind": kind, "retryable": retryable},
    )


@router.post("")
def generate(
    req: GenerateRequest,
    settings: Settings = Depends(get_settings),
    client_factory: ClientFactory = Depends(get_client_factory),
):
    """Generate senses, collocation profiles, examples and graph for a word."""
    if not isinstance(req.word, str) or not req.word.strip():
        raise _error(400, "Missing 'word'", "validation")
    word = req.word.strip()

    try:
        client = client_factory(settings)
        data = generate_entry(word, client, settings.model)
    except GenerationError as e:
        logger.warning("generate %r failed (%s): %s", word, e.kind, e.message)
        raise HTTPException(status_code=e.status, detail=e.to_dict())
    except Exception as e:
        logger.exception("generate %r crashed", word)
        raise _error(500, str(e) or "Unknown error", "internal")

    logger.info(
        "generated %r: %d senses, %d profiles, %d examples",
        word, len(data["senses"]), len(data["profiles"]), len(data["examples"]),
    )
    return {"word": word, **data}
