# src/lexcoll/core/generate.py
"""
Generate a word entry with an LLM when the local dataset has no match.

The model is asked for the dataset's JSON shape. Whatever comes back is
normalized; the graph is kept only if it is well formed, otherwise it is
rebuilt from the profiles.

Gemini is reached through its OpenAI-compatible endpoint, so the client is a
plain `openai.OpenAI` with a different base_url.
"""

import json
import logging

import openai
from openai import OpenAI

from lexcoll.config import Settings
from lexcoll.core.graph import API_TOP_N, build_graph, is_well_formed
from lexcoll.core.normalize import normalize_entry


logger = logging.getLogger(__name__)


class GenerationError(Exception):
    """Base for failures at the generation boundary."""
    status = 500
    kind = "internal"
    retryable = False

    def __init__(self, message: str, details: str | None = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self) -> dict:
        d = {"error": self.message, "kind": self.kind, "retryable": self.retryable}
        if self.details is not None:
            d["details"] = self.details
        return d


class ConfigurationError(GenerationError):
    """Service credential missing. Fatal; retrying will not help."""
    kind = "config"


class UpstreamError(GenerationError):
    """The model service failed. The caller may retry."""
    status = 502
    kind = "upstream"
    retryable = True


class ParseError(GenerationError):
    """No JSON object could be recovered from the model's text."""
    kind = "parse"


def build_prompt(word: str) -> str:
    return f"""You are a corpus linguistics assistant. Build realistic collocation profiles for the English lemma "{word}".
Strictly output ONLY valid JSON (no markdown, no comments) with this schema:
{{
  "senses": [
    {{"id": "{word}.s1", "label": "short label", "gloss": "concise definition"}},
    {{"id": "{word}.s2", "label": "short label", "gloss": "concise definition"}}
  ],
  "profiles": [
    {{
      "sense_id": "{word}.s1",
      "top_collocations": [
        {{"token": "string", "freq": 240, "pmi": 3.4, "position": "left"}},
        {{"token": "string", "freq": 160, "pmi": 2.7, "position": "right"}}
      ]
    }}
  ],
  "examples": [
    {{"sentence": "short example sentence using {word}", "sense_id": "{word}.s1"}}
  ],
  "graph": {{
    "nodes": [
      {{"id": "{word}", "group": "target"}}
    ],
    "links": []
  }}
}}
Constraints:
- Provide 2–4 senses. Keep labels compact (e.g., "motion", "manage/operate").
- For each sense provide 8–12 collocations sorted by freq (desc).
- token: lowercased collocate (may be bigram like "make sure"). Avoid duplicates across senses where possible.
- freq: realistic integer frequency (range ~5–800).
- pmi: realistic float (0.5–6.5). Higher for more specific collocates.
- position: "left" if collocate tends to appear before the target, else "right".
- Provide 4–8 diverse example sentences; each maps to one of the sense ids.
- Build a graph from ALL profiles: take the top {API_TOP_N} collocates by summed freq across senses; nodes are the target and these collocates; links connect the target to each collocate with weight = summed freq.
- Return JSON only."""


def extract_json(text: str) -> dict:
    """
    Parse the outermost {...} span of `text`.

    Tolerates markdown fences and chatter around the object.
    """
    start = text.find("{")
    end = text.rfind("}")
    if start != -1 and end > start:
        try:
            parsed = json.loads(text[start:end + 1])
        except json.JSONDecodeError:
            parsed = None
        if isinstance(parsed, dict):
            return parsed
    raise ParseError("Failed to parse JSON from model response")


def make_client(settings: Settings) -> OpenAI:
    if not settings.gemini_api_key:
        raise ConfigurationError("GOOGLE_GEMINI_API_KEY is not configured")
    return OpenAI(api_key=settings.gemini_api_key, base_url=settings.gemini_base_url)


def request_text(word: str, client: OpenAI, model: str) -> str:
    """Ask the model for `word` and return its raw text reply."""
    try:
        response = client.chat.completions.create(
            model=model,
            messages=[{"role": "user", "content": build_prompt(word)}],
        )
    except openai.APIStatusError as e:
        raise UpstreamError("Gemini request failed", details=e.response.text) from e
    except openai.APIError as e:
        raise UpstreamError("Gemini request failed", details=str(e)) from e

    if not response.choices:
        return ""
    return response.choices[0].message.content or ""


def build_response(word: str, parsed: dict) -> dict:
    """Normalized entry plus a graph that is guaranteed to be well formed."""
    entry = normalize_entry(parsed, word=word)

    graph = parsed.get("graph")
    if not is_well_formed(graph, word=word, max_links=API_TOP_N):
        logger.info("rebuilding graph for %r from %d profiles", word, len(entry.profiles))
        profiles = [p.collocations for p in entry.profiles]
        graph = build_graph(profiles, word, top_n=API_TOP_N).to_dict()

    return {**entry.to_dict(), "graph": graph}


def generate_entry(word: str, client: OpenAI, model: str) -> dict:
    text = request_text(word, client, model)
    parsed = extract_json(text)
    return build_response(word, parsed)
