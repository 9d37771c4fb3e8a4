"""Analysis orchestrator: runs the 19 index calculators and builds the summary.

The summary is rule based. Special features come from per-index rule
ladders (first match wins within a ladder, ladders are independent);
recommendations come from percentile lists followed by per-domain rules
in a fixed order.
"""

import logging
import math
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from operator import ge, le, lt
from typing import Callable, Mapping, Optional

from dkt_mcp import cognitive_indices, lateralization_indices
from dkt_mcp import interpretations as text
from dkt_mcp.calculators import IndexId, IndexSpec, calculate_index
from dkt_mcp.constants import (
    EXCELLENT_PERCENTILE,
    TOP_STRENGTH_LIMIT,
    TOP_STRENGTH_PERCENTILE,
    WEAK_PERCENTILE,
)
from dkt_mcp.metrics import record_poisoned_index, record_region_coverage
from dkt_mcp.models import AnalysisResult, AnalysisSummary, HemisphereRegionMap, IndexResult
from dkt_mcp.scoring import round_half_up

logger = logging.getLogger("dkt-mcp")

INDEX_SPECS: Mapping[IndexId, IndexSpec] = {
    spec.index_id: spec
    for spec in (
        lateralization_indices.HANDEDNESS,
        lateralization_indices.DOMINANT_EYE,
        lateralization_indices.PREFERRED_NOSTRIL,
        lateralization_indices.LANGUAGE_LATERALIZATION_INDEX,
        lateralization_indices.SPATIAL_ATTENTION,
        lateralization_indices.EMOTION,
        lateralization_indices.FACE_RECOGNITION,
        lateralization_indices.MUSIC,
        lateralization_indices.THEORY_OF_MIND,
        lateralization_indices.LOGICAL_REASONING,
        lateralization_indices.MATHEMATICAL_ABILITY,
        cognitive_indices.OLFACTORY,
        cognitive_indices.LANGUAGE,
        cognitive_indices.READING,
        lateralization_indices.DYSLEXIA_RISK,
        cognitive_indices.EMPATHY,
        cognitive_indices.EXECUTIVE,
        cognitive_indices.SPATIAL,
        cognitive_indices.FLUID_INTELLIGENCE,
    )
}

for _spec in INDEX_SPECS.values():
    _spec.validate()


# =============================================================================
# Summary Rules
# =============================================================================

Predicate = Callable[[IndexResult], bool]


@dataclass(frozen=True)
class SummaryRule:
    """Emit ``text`` when ``predicate`` holds for the result of ``index_id``."""

    index_id: IndexId
    predicate: Predicate
    text: str


def _value(op: Callable[[float, float], bool], threshold: float) -> Predicate:
    return lambda result: op(result.value, threshold)


def _percentile(op: Callable[[float, float], bool], threshold: float) -> Predicate:
    return lambda result: op(result.percentile, threshold)


_FEATURES = text.SPECIAL_FEATURES
_RECOMMENDATIONS = text.RECOMMENDATIONS

# Each inner tuple is one ladder; only its first matching rule fires.
FEATURE_LADDERS: tuple[tuple[SummaryRule, ...], ...] = (
    (
        SummaryRule(IndexId.HANDEDNESS, _value(lt, -0.84), _FEATURES["left_handed"]),
        SummaryRule(IndexId.HANDEDNESS, _value(ge, 1.28), _FEATURES["extreme_right_handed"]),
    ),
    (
        SummaryRule(IndexId.DOMINANT_EYE, _value(ge, 1.5), _FEATURES["extreme_right_eye"]),
        SummaryRule(IndexId.DOMINANT_EYE, _value(le, -1.5), _FEATURES["extreme_left_eye"]),
    ),
    (
        SummaryRule(IndexId.PREFERRED_NOSTRIL, _value(ge, 1.2), _FEATURES["extreme_right_nostril"]),
        SummaryRule(IndexId.PREFERRED_NOSTRIL, _value(le, -1.2), _FEATURES["extreme_left_nostril"]),
    ),
    (
        SummaryRule(
            IndexId.LANGUAGE_LATERALIZATION, _value(lt, -0.15), _FEATURES["right_language_lateralization"]
        ),
        SummaryRule(
            IndexId.LANGUAGE_LATERALIZATION,
            lambda result: -0.05 <= result.value <= 0.05,
            _FEATURES["bilateral_language"],
        ),
    ),
    (
        SummaryRule(
            IndexId.SPATIAL_ATTENTION, _value(ge, 0.80), _FEATURES["extreme_right_spatial_attention"]
        ),
    ),
    (
        SummaryRule(IndexId.EMOTION, _value(ge, 0.90), _FEATURES["extreme_right_emotion"]),
        SummaryRule(IndexId.EMOTION, _value(le, -0.50), _FEATURES["left_emotion_depression"]),
    ),
    (SummaryRule(IndexId.FACE_RECOGNITION, _value(ge, 1.00), _FEATURES["extreme_face_recognition"]),),
    (SummaryRule(IndexId.MUSIC, _value(ge, 1.20), _FEATURES["extreme_music_talent"]),),
    (SummaryRule(IndexId.THEORY_OF_MIND, _value(ge, 0.80), _FEATURES["extreme_mentalization"]),),
    (
        SummaryRule(IndexId.DYSLEXIA_RISK, _value(lt, -1.0), _FEATURES["high_dyslexia_risk"]),
        SummaryRule(IndexId.DYSLEXIA_RISK, _value(lt, -0.5), _FEATURES["moderate_dyslexia_risk"]),
    ),
    (SummaryRule(IndexId.LANGUAGE, _percentile(ge, 99), _FEATURES["excellent_language"]),),
    (SummaryRule(IndexId.FLUID_INTELLIGENCE, _percentile(ge, 98), _FEATURES["excellent_fluid_iq"]),),
    (
        SummaryRule(IndexId.LOGICAL_REASONING, _value(le, -0.80), _FEATURES["extreme_logical_talent"]),
        SummaryRule(IndexId.LOGICAL_REASONING, _value(le, -0.50), _FEATURES["significant_logical_ability"]),
    ),
    (
        SummaryRule(IndexId.MATHEMATICAL_ABILITY, _value(le, -0.90), _FEATURES["extreme_math_talent"]),
        SummaryRule(IndexId.MATHEMATICAL_ABILITY, _value(le, -0.60), _FEATURES["significant_math_ability"]),
    ),
)

DOMAIN_RECOMMENDATION_LADDERS: tuple[tuple[SummaryRule, ...], ...] = (
    (SummaryRule(IndexId.LANGUAGE, _percentile(ge, 90), _RECOMMENDATIONS["language_work"]),),
    (SummaryRule(IndexId.READING, _percentile(ge, 90), _RECOMMENDATIONS["reading_research"]),),
    (SummaryRule(IndexId.SPATIAL, _percentile(ge, 90), _RECOMMENDATIONS["spatial_work"]),),
    (SummaryRule(IndexId.EMPATHY, _percentile(ge, 90), _RECOMMENDATIONS["empathy_work"]),),
    (SummaryRule(IndexId.EXECUTIVE, _percentile(ge, 90), _RECOMMENDATIONS["executive_work"]),),
    (SummaryRule(IndexId.MUSIC, _percentile(ge, 92), _RECOMMENDATIONS["music_development"]),),
    (SummaryRule(IndexId.FACE_RECOGNITION, _percentile(ge, 90), _RECOMMENDATIONS["face_recognition_work"]),),
    (SummaryRule(IndexId.LOGICAL_REASONING, _value(le, -0.50), _RECOMMENDATIONS["logical_work"]),),
    (
        SummaryRule(IndexId.MATHEMATICAL_ABILITY, _value(le, -0.60), _RECOMMENDATIONS["math_work"]),
        SummaryRule(IndexId.MATHEMATICAL_ABILITY, _value(ge, 0.40), _RECOMMENDATIONS["spatial_math_work"]),
    ),
    (SummaryRule(IndexId.DYSLEXIA_RISK, _value(lt, -0.5), _RECOMMENDATIONS["dyslexia_assessment"]),),
    (SummaryRule(IndexId.EMOTION, _value(le, -0.50), _RECOMMENDATIONS["emotional_health"]),),
)


def _apply_ladders(
    ladders: tuple[tuple[SummaryRule, ...], ...], results: Mapping[IndexId, IndexResult]
) -> list[str]:
    fired = []
    for ladder in ladders:
        for rule in ladder:
            result = results.get(rule.index_id)
            if result is not None and rule.predicate(result):
                fired.append(rule.text)
                break
    return fired


def summarize(results: Mapping[IndexId, IndexResult]) -> AnalysisSummary:
    """Build top strengths, special features and recommendations.

    Args:
        results: Index results keyed by IndexId, in positional order

    Returns:
        AnalysisSummary
    """
    indices = list(results.values())

    # sorted() is stable, ties keep positional order
    strongest = sorted(
        (r for r in indices if r.percentile >= TOP_STRENGTH_PERCENTILE),
        key=lambda r: r.percentile,
        reverse=True,
    )[:TOP_STRENGTH_LIMIT]
    top_strengths = [f"{r.name} (Top {100 - r.percentile}%)" for r in strongest]

    special_features = _apply_ladders(FEATURE_LADDERS, results)

    recommendations = []
    excellent = [r.name for r in indices if r.percentile >= EXCELLENT_PERCENTILE]
    if excellent:
        recommendations.append(_RECOMMENDATIONS["excellent_performance"].format(areas=", ".join(excellent)))
    weak = [r.name for r in indices if r.percentile < WEAK_PERCENTILE]
    if weak:
        recommendations.append(_RECOMMENDATIONS["relatively_weak"].format(areas=", ".join(weak)))
    recommendations.extend(_apply_ladders(DOMAIN_RECOMMENDATION_LADDERS, results))
    if not recommendations:
        recommendations.append(_RECOMMENDATIONS["balanced_development"])

    return AnalysisSummary(
        top_strengths=tuple(top_strengths),
        special_features=tuple(special_features),
        recommendations=tuple(recommendations),
    )


# =============================================================================
# Overall Score
# =============================================================================

# Ability-type indices only; higher percentile is better for each of these
OVERALL_SCORE_WEIGHTS: Mapping[IndexId, float] = {
    IndexId.OLFACTORY: 0.08,
    IndexId.LANGUAGE: 0.15,
    IndexId.READING: 0.12,
    IndexId.EMPATHY: 0.12,
    IndexId.EXECUTIVE: 0.18,
    IndexId.SPATIAL: 0.15,
    IndexId.FLUID_INTELLIGENCE: 0.20,
    IndexId.DYSLEXIA_RISK: 0.10,
}
DEFAULT_OVERALL_SCORE = 75


def overall_score(results: Mapping[IndexId, IndexResult]) -> int:
    """Map the weighted mean ability percentile onto a 0-100 score.

    Percentile 50 maps to 75, 84 to 90 and 100 to 100. Indices with a NaN
    percentile are left out; with nothing left the default of 75 is returned.
    """
    weighted_sum = 0.0
    total_weight = 0.0
    for index_id, weight in OVERALL_SCORE_WEIGHTS.items():
        result = results.get(index_id)
        if result is None or math.isnan(result.percentile):
            continue
        weighted_sum += result.percentile * weight
        total_weight += weight

    if total_weight == 0:
        return DEFAULT_OVERALL_SCORE

    raw = weighted_sum / total_weight
    if raw >= 84:
        score = 90 + (raw - 84) * (10 / 16)
    elif raw >= 50:
        score = 75 + (raw - 50) * (15 / 34)
    elif raw >= 16:
        score = 60 + (raw - 16) * (15 / 34)
    else:
        score = 40 + raw * (20 / 16)
    return int(round_half_up(min(100.0, max(0.0, score))))


# =============================================================================
# Entry Point
# =============================================================================


def run_analysis(
    lh: HemisphereRegionMap,
    rh: HemisphereRegionMap,
    lh_aux: Optional[HemisphereRegionMap] = None,
    rh_aux: Optional[HemisphereRegionMap] = None,
    max_workers: int = 1,
) -> AnalysisResult:
    """Score all 19 indices for one subject and summarize them.

    Never raises for missing regions or unparsable values. The returned
    indices are always in ``IndexId`` order regardless of ``max_workers``.

    Args:
        lh: Left-hemisphere DKT region map
        rh: Right-hemisphere DKT region map
        lh_aux: Optional auxiliary left map (e.g. BA_exvivo); accepted, not scored
        rh_aux: Optional auxiliary right map; accepted, not scored
        max_workers: Run calculators on a thread pool when greater than 1

    Returns:
        AnalysisResult with 19 indices, summary and overall score
    """
    if lh_aux is not None or rh_aux is not None:
        logger.info(
            f"Auxiliary maps received (lh={len(lh_aux or {})}, rh={len(rh_aux or {})} regions); "
            "not used by any index"
        )

    specs = list(INDEX_SPECS.values())
    if max_workers > 1:
        with ThreadPoolExecutor(max_workers=max_workers) as pool:
            scored = list(pool.map(lambda spec: calculate_index(spec, lh, rh), specs))
    else:
        scored = [calculate_index(spec, lh, rh) for spec in specs]

    results = {spec.index_id: result for spec, result in zip(specs, scored)}

    for result in scored:
        record_region_coverage(result.name, result.coverage)
        if math.isnan(result.value):
            record_poisoned_index(result.name)

    logger.info(f"Analysis complete: {len(scored)} indices, lh={len(lh)} rh={len(rh)} regions")

    return AnalysisResult(
        indices=tuple(scored),
        summary=summarize(results),
        overall_score=overall_score(results),
    )
