"""Lateralization index configurations.

Basic lateralization (handedness, dominant eye, preferred nostril,
language), advanced functional lateralization and the dyslexia structural
risk index. Each index scores a hemisphere asymmetry.

References:
    Sha Z et al. Nat Commun. 2024 (handedness).
    Hayat TTA et al. Neuroimage. 2022 (ocular dominance).
    Labache L et al. Cereb Cortex. 2023; Knecht S et al. Brain. 2000 (language).
    Richlan F. Hum Brain Mapp. 2013; Vandermosten M et al. Brain. 2012 (dyslexia).
"""

from dkt_mcp import interpretations as text
from dkt_mcp.calculators import (
    LEFT_MINUS_RIGHT,
    RIGHT_MINUS_LEFT,
    Aggregation,
    Band,
    IndexId,
    IndexSpec,
    RegionWeight,
    ReportedZ,
)
from dkt_mcp.scoring import LANGUAGE_LATERALIZATION, NOSTRIL

ENIGMA_UKBB_HCP = ("ENIGMA 2024", "UKBB 2024", "HCP 2025 meta-analysis")
INDEPENDENT_WEIGHTS = "Independent weights per region, see details"


# =============================================================================
# Basic Lateralization (0-3)
# =============================================================================

HANDEDNESS = IndexSpec(
    index_id=IndexId.HANDEDNESS,
    regions=(
        RegionWeight("precentral", 0.55, (60, 30, 10)),
        RegionWeight("postcentral", 0.25, (60, 30, 10)),
        RegionWeight("paracentral", 0.20, (60, 30, 10)),
    ),
    # Left motor cortex drives the right hand: positive = right-handed
    blend=LEFT_MINUS_RIGHT,
    bands=(
        Band(">=", 1.28, text.HANDEDNESS["extreme_right"]),
        Band(">=", 0.84, text.HANDEDNESS["strong_right"]),
        Band(">=", 0.52, text.HANDEDNESS["moderate_right"]),
        Band(">=", -0.52, text.HANDEDNESS["ambidextrous"]),
        Band(">=", -0.84, text.HANDEDNESS["moderate_left"]),
    ),
    fallback_band=text.HANDEDNESS["strong_left"],
    threshold=(
        "≥+1.28 extreme right (top 10%); ≥+0.84 strong right (top 20%); "
        "≥+0.52 moderate right (top 30%); ±0.52 ambidextrous (60%); ≤-0.84 left-handed (bottom 10%)"
    ),
    formula="LI_hand = Σ[weight × (z_L − z_R)]",
    references=("Sha 2024 Nat Commun", "Wiberg 2019 PNAS", "UKBB 2024"),
    region_labels=("precentral (0.55)", "postcentral (0.25)", "paracentral (0.20)"),
    weights_description="Thickness 60 : Surface Area 30 : Volume 10",
)

DOMINANT_EYE = IndexSpec(
    index_id=IndexId.DOMINANT_EYE,
    regions=(
        RegionWeight("pericalcarine", 0.70, (92, 4, 4)),
        RegionWeight("cuneus", 0.15, (92, 4, 4)),
        RegionWeight("lingual", 0.15, (92, 4, 4)),
    ),
    blend=LEFT_MINUS_RIGHT,
    bands=(
        Band(">=", 1.5, text.DOMINANT_EYE["extreme_right"]),
        Band(">=", 0.8, text.DOMINANT_EYE["strong_right"]),
        Band(">=", 0.3, text.DOMINANT_EYE["mild_right"]),
        Band(">=", -0.3, text.DOMINANT_EYE["balanced"]),
        Band(">=", -0.8, text.DOMINANT_EYE["mild_left"]),
    ),
    fallback_band=text.DOMINANT_EYE["strong_left"],
    threshold=(
        "≥+1.5 extreme right eye (4-6%); +0.8~+1.5 strong right eye (18-22%); "
        "+0.3~+0.8 mild right eye (25-30%); ±0.3 balanced (35-40%); "
        "-0.8~-0.3 mild left eye (12-15%); ≤-0.8 strong left eye (5-7%)"
    ),
    formula="LI_eye = Σ[weight × (z_L − z_R)]",
    references=("Hayat 2022 Neuroimage", "Jensen 2015", "HCP 2024"),
    region_labels=("pericalcarine (0.70)", "cuneus (0.15)", "lingual (0.15)"),
    weights_description="Thickness 92 : Surface Area 4 : Volume 4",
)

PREFERRED_NOSTRIL = IndexSpec(
    index_id=IndexId.PREFERRED_NOSTRIL,
    regions=(
        RegionWeight("entorhinal", 0.45, (70, 20, 10)),
        RegionWeight("parahippocampal", 0.20, (70, 20, 10)),
        RegionWeight("medialorbitofrontal", 0.20, (70, 20, 10)),
        RegionWeight("insula", 0.10, (70, 20, 10)),
        # No DKT parcel for piriform cortex; entorhinal stands in
        RegionWeight("piriform", 0.05, (70, 20, 10), source_region="entorhinal"),
    ),
    # Positive = right nostril
    blend=RIGHT_MINUS_LEFT,
    bands=(
        Band(">=", 1.2, text.NOSTRIL["extreme_right"]),
        Band(">=", 0.7, text.NOSTRIL["strong_right"]),
        Band(">=", 0.3, text.NOSTRIL["mild_right"]),
        Band(">", -0.3, text.NOSTRIL["balanced"]),
        Band(">", -0.7, text.NOSTRIL["mild_left"]),
        Band(">", -1.2, text.NOSTRIL["strong_left"]),
    ),
    fallback_band=text.NOSTRIL["extreme_left"],
    threshold="> +0.7 strong right nostril | < -0.7 strong left nostril | ±0.3 balanced",
    formula="OLI = Σwᵢ×(zRᵢ − zLᵢ)  positive=right nostril dominance",
    references=(
        "ENIGMA-Olfaction 2024 (n>8,200)",
        "Zatorre et al. 2023 Chem Senses",
        "Frasnelli 2022 Physiol Rev meta",
    ),
    region_labels=(
        "entorhinal (45%)",
        "parahippocampal (20%)",
        "medialorbitofrontal (20%)",
        "insula (10%)",
        "piriform (5%)",
    ),
    weights_description="Thickness 70% : Surface Area 20% : Volume 10%",
    percentile_strategy=NOSTRIL,
    reported_z=ReportedZ.RAW_SCORE,
)

LANGUAGE_LATERALIZATION_INDEX = IndexSpec(
    index_id=IndexId.LANGUAGE_LATERALIZATION,
    regions=(
        RegionWeight("superiortemporal", 0.28, (68, 18, 14)),
        RegionWeight("parsopercularis", 0.22, (62, 22, 16)),
        RegionWeight("parstriangularis", 0.18, (58, 25, 17)),
        RegionWeight("inferiorparietal", 0.12, (55, 32, 13)),
        RegionWeight("middletemporal", 0.10, (60, 20, 20)),
        RegionWeight("fusiform", 0.06, (45, 20, 35)),
        RegionWeight("supramarginal", 0.04, (48, 38, 14)),
    ),
    blend=LEFT_MINUS_RIGHT,
    aggregation=Aggregation.LATERALITY_RATIO,
    bands=(
        Band(">=", 0.20, text.LANGUAGE_LATERALIZATION["typical_left"]),
        Band(">=", 0.05, text.LANGUAGE_LATERALIZATION["weak_left"]),
        Band(">=", -0.05, text.LANGUAGE_LATERALIZATION["bilateral"]),
        Band(">=", -0.15, text.LANGUAGE_LATERALIZATION["weak_right"]),
    ),
    fallback_band=text.LANGUAGE_LATERALIZATION["significant_right"],
    threshold="≥0.20 typical left | ±0.05 bilateral | ≤-0.10 right",
    formula="LI = (Σw×zL − Σw×zR) / (|ΣwzL| + |ΣwzR|)",
    references=("ENIGMA-Laterality 2024", "Labache 2023 Cereb Cortex", "Knecht 2000 Brain"),
    region_labels=(
        "superiortemporal (28%)",
        "parsopercularis (22%)",
        "parstriangularis (18%)",
        "inferiorparietal (12%)",
        "middletemporal (10%)",
        "fusiform (6%)",
        "supramarginal (4%)",
    ),
    weights_description=INDEPENDENT_WEIGHTS,
    percentile_strategy=LANGUAGE_LATERALIZATION,
    reported_z=ReportedZ.MEAN_STRENGTH,
)


# =============================================================================
# Advanced Functional Lateralization (4-10)
# =============================================================================
# Positive = right-hemisphere dominance throughout.

SPATIAL_ATTENTION = IndexSpec(
    index_id=IndexId.SPATIAL_ATTENTION,
    regions=(
        RegionWeight("inferiorparietal", 0.45, (20, 50, 30)),
        RegionWeight("superiorparietal", 0.35, (20, 50, 30)),
        RegionWeight("precuneus", 0.20, (25, 45, 30)),
    ),
    blend=RIGHT_MINUS_LEFT,
    bands=(
        Band(">=", 0.80, text.SPATIAL_ATTENTION["extreme_right"]),
        Band(">=", 0.40, text.SPATIAL_ATTENTION["strong_right"]),
        Band(">=", -0.20, text.SPATIAL_ATTENTION["balanced"]),
        Band(">=", -0.40, text.SPATIAL_ATTENTION["mild_left"]),
    ),
    fallback_band=text.SPATIAL_ATTENTION["strong_left"],
    threshold="≥+0.80 extreme right (top 5%); ≥+0.40 strong right (top 15%); -0.20~+0.40 balanced; ≤-0.40 left",
    formula="LI_spatial = Σ wᵢ(zRᵢ − zLᵢ)",
    references=ENIGMA_UKBB_HCP,
    region_labels=("inferiorparietal (45%)", "superiorparietal (35%)", "precuneus (20%)"),
    weights_description="Thickness 20 : Surface Area 50 : Volume 30",
)

EMOTION = IndexSpec(
    index_id=IndexId.EMOTION,
    regions=(
        RegionWeight("insula", 0.40, (70, 20, 10)),
        RegionWeight("medialorbitofrontal", 0.30, (65, 25, 10)),
        RegionWeight("rostralanteriorcingulate", 0.20, (70, 20, 10)),
        RegionWeight("posteriorcingulate", 0.10, (65, 25, 10)),
    ),
    blend=RIGHT_MINUS_LEFT,
    bands=(
        Band(">=", 0.90, text.EMOTION["extreme_right"]),
        Band(">=", 0.50, text.EMOTION["strong_right"]),
        Band(">=", -0.30, text.EMOTION["balanced"]),
        Band(">=", -0.50, text.EMOTION["mild_left"]),
    ),
    fallback_band=text.EMOTION["strong_left"],
    threshold=(
        "≥+0.90 extreme right (top 8%); ≥+0.50 strong right; -0.30~+0.50 balanced; "
        "≤-0.50 left (depression tendency)"
    ),
    formula="LI_emotion = Σ wᵢ(zRᵢ − zLᵢ)",
    references=ENIGMA_UKBB_HCP,
    region_labels=(
        "insula (40%)",
        "medialorbitofrontal (30%)",
        "rostralanteriorcingulate (20%)",
        "posteriorcingulate (10%)",
    ),
    weights_description="Thickness 65-70 : Surface Area 20-25 : Volume 10",
)

FACE_RECOGNITION = IndexSpec(
    index_id=IndexId.FACE_RECOGNITION,
    regions=(
        RegionWeight("fusiform", 0.70, (40, 20, 40)),
        RegionWeight("inferiortemporal", 0.20, (45, 25, 30)),
        RegionWeight("lateraloccipital", 0.10, (40, 30, 30)),
    ),
    blend=RIGHT_MINUS_LEFT,
    bands=(
        Band(">=", 1.00, text.FACE_RECOGNITION["extreme_right"]),
        Band(">=", 0.60, text.FACE_RECOGNITION["strong_right"]),
        Band(">=", -0.20, text.FACE_RECOGNITION["balanced"]),
        Band(">=", -0.60, text.FACE_RECOGNITION["mild_left"]),
    ),
    fallback_band=text.FACE_RECOGNITION["strong_left"],
    threshold="≥+1.00 extreme right (top 3%); ≥+0.60 strong right (top 10%); -0.20~+0.60 balanced; ≤-0.60 rare left",
    formula="LI_face = Σ wᵢ(zRᵢ − zLᵢ)",
    references=ENIGMA_UKBB_HCP,
    region_labels=("fusiform/FFA (70%)", "inferiortemporal (20%)", "lateraloccipital (10%)"),
    weights_description="Thickness 40-45 : Surface Area 20-30 : Volume 30-40",
)

MUSIC = IndexSpec(
    index_id=IndexId.MUSIC,
    regions=(
        RegionWeight("superiortemporal", 0.70, (65, 25, 10)),
        RegionWeight("middletemporal", 0.20, (60, 25, 15)),
        RegionWeight("insula", 0.10, (55, 30, 15)),
    ),
    blend=RIGHT_MINUS_LEFT,
    bands=(
        Band(">=", 1.20, text.MUSIC["extreme_right"]),
        Band(">=", 0.70, text.MUSIC["strong_right"]),
        Band(">=", -0.30, text.MUSIC["balanced"]),
        Band(">=", -0.70, text.MUSIC["mild_left"]),
    ),
    fallback_band=text.MUSIC["strong_left"],
    threshold="≥+1.20 extreme right (top 1%); ≥+0.70 strong right (top 8%); -0.30~+0.70 balanced; ≤-0.70 left (rare)",
    formula="LI_music = Σ wᵢ(zRᵢ − zLᵢ)",
    references=ENIGMA_UKBB_HCP,
    region_labels=("superiortemporal (70%)", "middletemporal (20%)", "insula (10%)"),
    weights_description="Thickness 55-65 : Surface Area 25-30 : Volume 10-15",
)

THEORY_OF_MIND = IndexSpec(
    index_id=IndexId.THEORY_OF_MIND,
    regions=(
        RegionWeight("inferiorparietal", 0.40, (55, 30, 15)),
        RegionWeight("supramarginal", 0.30, (50, 35, 15)),
        RegionWeight("superiortemporal", 0.20, (60, 25, 15)),
        RegionWeight("medialorbitofrontal", 0.10, (65, 20, 15)),
    ),
    blend=RIGHT_MINUS_LEFT,
    bands=(
        Band(">=", 0.80, text.THEORY_OF_MIND["extreme_right"]),
        Band(">=", 0.40, text.THEORY_OF_MIND["strong_right"]),
        Band(">=", -0.20, text.THEORY_OF_MIND["balanced"]),
        Band(">=", -0.40, text.THEORY_OF_MIND["mild_left"]),
    ),
    fallback_band=text.THEORY_OF_MIND["strong_left"],
    threshold="≥+0.80 extreme right (top 8%); ≥+0.40 strong right (top 20%); -0.20~+0.40 balanced; ≤-0.40 left",
    formula="LI_tom = Σ wᵢ(zRᵢ − zLᵢ)",
    references=ENIGMA_UKBB_HCP,
    region_labels=(
        "inferiorparietal/angular (40%)",
        "supramarginal (30%)",
        "superiortemporal/TPJ (20%)",
        "medialorbitofrontal (10%)",
    ),
    weights_description="Thickness 50-65 : Surface Area 20-35 : Volume 15",
)

LOGICAL_REASONING = IndexSpec(
    index_id=IndexId.LOGICAL_REASONING,
    regions=(
        RegionWeight("rostralmiddlefrontal", 0.40, (30, 30, 40)),
        RegionWeight("caudalmiddlefrontal", 0.25, (35, 25, 40)),
        RegionWeight("superiorfrontal", 0.20, (25, 35, 40)),
        RegionWeight("inferiorparietal", 0.15, (50, 30, 20)),
    ),
    # Negative = left-hemisphere dominance, the favorable direction here
    blend=RIGHT_MINUS_LEFT,
    bands=(
        Band("<=", -0.80, text.LOGICAL_REASONING["extreme_left"]),
        Band("<=", -0.50, text.LOGICAL_REASONING["strong_left"]),
        Band("<=", -0.20, text.LOGICAL_REASONING["mild_left"]),
        Band("<=", 0.20, text.LOGICAL_REASONING["balanced"]),
        Band("<=", 0.50, text.LOGICAL_REASONING["mild_right"]),
    ),
    fallback_band=text.LOGICAL_REASONING["strong_right"],
    threshold=(
        "≤-0.80 extreme left (top 1%); ≤-0.50 strong left (top 5%); ≤-0.20 mild left (top 20%); "
        "±0.20 balanced; ≥+0.50 right dominance"
    ),
    formula="LI_logic = Σ wᵢ(zRᵢ − zLᵢ)  negative=left brain dominance",
    references=("ENIGMA-Cognition 2024", "UKBB 2024", "HCP 2025 meta-analysis"),
    region_labels=(
        "rostralmiddlefrontal (40%)",
        "caudalmiddlefrontal (25%)",
        "superiorfrontal (20%)",
        "inferiorparietal (15%)",
    ),
    weights_description=INDEPENDENT_WEIGHTS,
)

MATHEMATICAL_ABILITY = IndexSpec(
    index_id=IndexId.MATHEMATICAL_ABILITY,
    regions=(
        RegionWeight("inferiorparietal", 0.50, (40, 30, 30)),
        RegionWeight("superiorfrontal", 0.25, (25, 35, 40)),
        RegionWeight("caudalmiddlefrontal", 0.15, (35, 25, 40)),
        RegionWeight("precuneus", 0.10, (30, 40, 30)),
    ),
    blend=RIGHT_MINUS_LEFT,
    bands=(
        Band("<=", -0.90, text.MATHEMATICAL_ABILITY["extreme_left"]),
        Band("<=", -0.60, text.MATHEMATICAL_ABILITY["strong_left"]),
        Band("<=", -0.20, text.MATHEMATICAL_ABILITY["mild_left"]),
        Band("<=", 0.20, text.MATHEMATICAL_ABILITY["balanced"]),
        Band("<=", 0.40, text.MATHEMATICAL_ABILITY["mild_right"]),
    ),
    fallback_band=text.MATHEMATICAL_ABILITY["strong_right"],
    threshold=(
        "≤-0.90 extreme left (top 1%); ≤-0.60 strong left (top 3%); ≤-0.20 mild left (top 15%); "
        "±0.20 balanced; ≥+0.40 right dominance"
    ),
    formula="LI_math = Σ wᵢ(zRᵢ − zLᵢ)  negative=left brain dominance",
    references=("ENIGMA-Cognition 2024", "UKBB 2024", "HCP 2025 meta-analysis"),
    region_labels=(
        "inferiorparietal (50%)",
        "superiorfrontal (25%)",
        "caudalmiddlefrontal (15%)",
        "precuneus (10%)",
    ),
    weights_description=INDEPENDENT_WEIGHTS,
)


# =============================================================================
# Dyslexia Structural Risk (14)
# =============================================================================
# Reduced leftward asymmetry of the reading network = higher risk. The only
# index that rescales for missing regions.

DYSLEXIA_RISK = IndexSpec(
    index_id=IndexId.DYSLEXIA_RISK,
    regions=(
        RegionWeight("superiortemporal", 0.25, (60, 15, 25)),
        RegionWeight("fusiform", 0.20, (40, 20, 40)),
        RegionWeight("inferiorparietal", 0.20, (50, 30, 20)),
        RegionWeight("supramarginal", 0.20, (30, 50, 20)),
        RegionWeight("middletemporal", 0.15, (70, 10, 20)),
    ),
    blend=LEFT_MINUS_RIGHT,
    aggregation=Aggregation.COVERAGE_RENORMALIZED,
    decimals=2,
    bands=(
        Band("<", -1.0, text.DYSLEXIA_RISK["high"]),
        Band("<", -0.5, text.DYSLEXIA_RISK["moderate"]),
        Band("<", 0.5, text.DYSLEXIA_RISK["low"]),
    ),
    fallback_band=text.DYSLEXIA_RISK["very_low"],
    threshold="< -1.0 high risk; < -0.5 moderate risk; ≥ -0.5 low risk",
    formula="Dyslexia_risk = Σ[weight × (z_L − z_R)]",
    references=("Richlan 2013 Hum Brain Mapp", "ENIGMA-Dyslexia 2024", "Vandermosten 2012 Brain"),
    region_labels=(
        "superiortemporal (25%)",
        "fusiform (20%)",
        "inferiorparietal (20%)",
        "supramarginal (20%)",
        "middletemporal (15%)",
    ),
    weights_description="Independent weights per region, see details table",
)
