"""
Dataset routes: /api/words
"""

from fastapi import APIRouter, Depends, HTTPException, Query

from lexcoll.core.dataset import Dataset
from lexcoll.core.graph import VIEW_TOP_N
from lexcoll.core.layout import layout
from lexcoll.core.view import project
from lexcoll.server.deps import get_dataset


router = APIRouter(prefix="/api/words", tags=["words"])


def _find(dataset: Dataset, word: str):
    entry = dataset.find(word)
    if entry is None:
        raise HTTPException(status_code=404, detail="Word not found")
    return entry


@router.get("")
async def list_words(dataset: Dataset = Depends(get_dataset)):
    """List every word in the local dataset."""
    return {"words": dataset.words()}


@router.get("/{word}")
async def get_word(word: str, dataset: Dataset = Depends(get_dataset)):
    """Get a normalized dataset entry."""
    return _find(dataset, word).to_dict()


@router.get("/{word}/graph")
async def get_word_graph(
    word: str,
    sense: list[str] | None = Query(None),
    top_n: int = Query(VIEW_TOP_N, ge=0, le=100),
    with_layout: bool = Query(True, alias="layout"),
    width: float = Query(800, gt=0),
    height: float = Query(380, gt=0),
    iterations: int = Query(180, ge=0, le=2000),
    dataset: Dataset = Depends(get_dataset),
):
    """
    Collocation graph for the selected senses (all senses if none given),
    optionally laid out.
    """
    entry = _find(dataset, word)
    selected = set(sense) if sense is not None else set(entry.sense_ids)
    view = project(entry, selected)
    graph = view.graph(top_n=top_n)

    result = {
        "word": entry.word,
        "senses": [sid for sid in entry.sense_ids if sid in selected],
        "examples": [e.to_dict() for e in view.examples],
    }
    if with_layout:
        result["graph"] = layout(graph, width=width, height=height, iterations=iterations).to_dict()
    else:
        result["graph"] = graph.to_dict()
    return result
