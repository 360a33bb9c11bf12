"""Fuzzy duplicate detection against existing materials.

The search runs rapidfuzz over each material's description and code,
keeps the best score per material and converts it to a distance
(0 = identical) before bucketing.
"""

from __future__ import annotations

import logging
from typing import Iterable

from rapidfuzz import fuzz, process, utils

from material_ai.models.analysis import DuplicateMatch
from material_ai.models.material import Material

logger = logging.getLogger(__name__)

SEARCH_DISTANCE_THRESHOLD = 0.3
EXACT_DISTANCE = 0.1
SIMILAR_DISTANCE = 0.3
DEFAULT_SIMILARITY_THRESHOLD = 0.7


def match_type_for(distance: float) -> str:
    if distance < EXACT_DISTANCE:
        return "exact"
    if distance < SIMILAR_DISTANCE:
        return "similar"
    return "fuzzy"


def _best_scores(query: str, materials: list[Material]) -> dict[int, float]:
    """Best 0-100 score per material index across description and code."""
    cutoff = (1 - SEARCH_DISTANCE_THRESHOLD) * 100
    best: dict[int, float] = {}
    for key_field in ("description", "material_code"):
        choices = {idx: getattr(m, key_field) for idx, m in enumerate(materials)}
        hits = process.extract(
            query,
            choices,
            scorer=fuzz.token_sort_ratio,
            processor=utils.default_process,
            limit=None,
            score_cutoff=cutoff,
        )
        for _, score, idx in hits:
            if score > best.get(idx, -1):
                best[idx] = score
    return best


def detect_duplicates(
    description: str,
    materials: Iterable[Material],
    threshold: float = DEFAULT_SIMILARITY_THRESHOLD,
) -> list[DuplicateMatch]:
    """Materials whose description or code resembles the new description.

    Matches are ordered by similarity, best first; only similarities strictly
    above the threshold are kept.
    """
    if not description.strip():
        return []

    materials = list(materials)
    matches: list[DuplicateMatch] = []
    for idx, score in _best_scores(description, materials).items():
        distance = 1 - score / 100
        similarity = round(score / 100, 2)
        if similarity <= threshold:
            continue
        matches.append(
            DuplicateMatch(
                material=materials[idx],
                similarity=similarity,
                match_type=match_type_for(distance),
            )
        )

    matches.sort(key=lambda match: match.similarity, reverse=True)
    logger.debug("Duplicate search for %r found %d match(es)", description, len(matches))
    return matches
