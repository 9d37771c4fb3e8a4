"""Sensory and cognitive ability index configurations.

Unlike the lateralization indices these score overall structural strength
of a network: a weighted blend of both hemispheres, higher is better.
"""

from dkt_mcp import interpretations as text
from dkt_mcp.calculators import (
    MEAN_OF_HEMISPHERES,
    MEAN_OF_HEMISPHERES_HALF_DETAIL,
    Band,
    Blend,
    IndexId,
    IndexSpec,
    RegionWeight,
)

# Left-weighted blends for the left-lateralized language and reading networks
LANGUAGE_BLEND = Blend(0.7, 0.3, 0.7, 0.3)
READING_BLEND = Blend(0.75, 0.25, 0.75, 0.25)
# Right-weighted blend for the right-lateralized parietal spatial network
SPATIAL_BLEND = Blend(0.4, 0.6, 0.4, 0.6)


def _uniform(regions: tuple[tuple[str, float], ...], metric_weights: tuple[int, int, int]) -> tuple[RegionWeight, ...]:
    return tuple(RegionWeight(region, weight, metric_weights) for region, weight in regions)


def _labels(regions: tuple[tuple[str, float], ...]) -> tuple[str, ...]:
    return tuple(f"{region} ({weight:.2f})" for region, weight in regions)


# =============================================================================
# Sensory (11)
# =============================================================================

_OLFACTORY_REGIONS = (("entorhinal", 0.60), ("parahippocampal", 0.20), ("medialorbitofrontal", 0.20))

OLFACTORY = IndexSpec(
    index_id=IndexId.OLFACTORY,
    regions=_uniform(_OLFACTORY_REGIONS, (80, 10, 10)),
    blend=MEAN_OF_HEMISPHERES,
    decimals=2,
    bands=(
        Band(">", 1.5, text.OLFACTORY["excellent"]),
        Band(">", 1.0, text.OLFACTORY["good"]),
        Band(">", -0.5, text.OLFACTORY["normal"]),
    ),
    fallback_band=text.OLFACTORY["needs_attention"],
    threshold="> +1.0 top 16%; > +1.5 top 7%",
    formula="Olfaction_z = Σ[weight × ((z_L + z_R)/2)]",
    references=("Saygin 2022 Neuroimage", "ENIGMA-Olfaction 2024"),
    region_labels=_labels(_OLFACTORY_REGIONS),
    weights_description="Thickness 80 : Surface Area 10 : Volume 10",
)


# =============================================================================
# Language and Reading (12-13)
# =============================================================================

_LANGUAGE_REGIONS = (
    ("superiortemporal", 0.35),
    ("parsopercularis", 0.25),
    ("parstriangularis", 0.20),
    ("middletemporal", 0.10),
    ("fusiform", 0.10),
)

LANGUAGE = IndexSpec(
    index_id=IndexId.LANGUAGE,
    regions=_uniform(_LANGUAGE_REGIONS, (45, 30, 25)),
    blend=LANGUAGE_BLEND,
    decimals=2,
    bands=(
        Band(">", 2.4, text.LANGUAGE["exceptional"]),
        Band(">", 2.0, text.LANGUAGE["excellent"]),
        Band(">", 1.0, text.LANGUAGE["good"]),
        Band(">", -0.5, text.LANGUAGE["normal"]),
    ),
    fallback_band=text.LANGUAGE["needs_attention"],
    threshold="> +2.0 top 2.5%; > +2.4 top 0.7%",
    formula="Language_z = Σ[weight × (0.7×z_L + 0.3×z_R)]",
    references=("Friederici 2022 Brain", "ENIGMA-Language 2024"),
    region_labels=(
        "superiortemporal (0.35)",
        "parsopercularis/BA44 (0.25)",
        "parstriangularis/BA45 (0.20)",
        "middletemporal (0.10)",
        "fusiform (0.10)",
    ),
    weights_description="Thickness 45 : Surface Area 30 : Volume 25",
)

_READING_REGIONS = (
    ("superiortemporal", 0.40),
    ("supramarginal", 0.25),
    ("inferiorparietal", 0.20),
    ("fusiform", 0.15),
)

READING = IndexSpec(
    index_id=IndexId.READING,
    regions=_uniform(_READING_REGIONS, (50, 30, 20)),
    blend=READING_BLEND,
    decimals=2,
    bands=(
        Band(">", 2.0, text.READING["excellent"]),
        Band(">", 1.0, text.READING["good"]),
        Band(">", -0.5, text.READING["normal"]),
    ),
    fallback_band=text.READING["needs_attention"],
    threshold="> +2.0 top 2.5%",
    formula="Reading_z = Σ[weight × (0.75×z_L + 0.25×z_R)]",
    references=("Black 2022 Brain", "ABCD/ENIGMA-Reading 2024"),
    region_labels=_labels(_READING_REGIONS),
    weights_description="Thickness 50 : Surface Area 30 : Volume 20",
)


# =============================================================================
# Cognitive Ability (15-18)
# =============================================================================

_EMPATHY_REGIONS = (
    ("rostralanteriorcingulate", 0.45),
    ("medialorbitofrontal", 0.25),
    ("insula", 0.20),
    ("posteriorcingulate", 0.10),
)

EMPATHY = IndexSpec(
    index_id=IndexId.EMPATHY,
    regions=_uniform(_EMPATHY_REGIONS, (80, 10, 10)),
    blend=MEAN_OF_HEMISPHERES_HALF_DETAIL,
    decimals=2,
    bands=(
        Band(">", 1.6, text.EMPATHY["excellent"]),
        Band(">", 1.5, text.EMPATHY["good"]),
        Band(">", 0.5, text.EMPATHY["above_average"]),
        Band(">", -0.5, text.EMPATHY["normal"]),
    ),
    fallback_band=text.EMPATHY["needs_attention"],
    threshold="> +1.5 top 7%; > +1.6 top 5%",
    formula="Empathy_z = Σ[weight × ((z_L + z_R)/2)]",
    references=("Timmers 2018 Neurosci Biobehav Rev", "UKBB-EQ 2024"),
    region_labels=_labels(_EMPATHY_REGIONS),
    weights_description="Thickness 80 : Surface Area 10 : Volume 10",
)

_EXECUTIVE_REGIONS = (
    ("superiorfrontal", 0.40),
    ("rostralmiddlefrontal", 0.30),
    ("caudalmiddlefrontal", 0.20),
    ("parsopercularis", 0.10),
)

EXECUTIVE = IndexSpec(
    index_id=IndexId.EXECUTIVE,
    regions=_uniform(_EXECUTIVE_REGIONS, (35, 25, 40)),
    blend=MEAN_OF_HEMISPHERES_HALF_DETAIL,
    decimals=2,
    bands=(
        Band(">", 1.9, text.EXECUTIVE["exceptional"]),
        Band(">", 1.8, text.EXECUTIVE["excellent"]),
        Band(">", 1.0, text.EXECUTIVE["good"]),
        Band(">", -0.5, text.EXECUTIVE["normal"]),
    ),
    fallback_band=text.EXECUTIVE["needs_attention"],
    threshold="> +1.8 top 4%; > +1.9 top 3%",
    formula="Executive_z = Σ[weight × ((z_L + z_R)/2)]",
    references=("Woolgar 2021 Neuropsychopharm", "ENIGMA-Cognition 2024"),
    region_labels=_labels(_EXECUTIVE_REGIONS),
    weights_description="Thickness 35 : Surface Area 25 : Volume 40",
)

_SPATIAL_REGIONS = (("inferiorparietal", 0.50), ("superiorparietal", 0.35), ("precuneus", 0.15))

SPATIAL = IndexSpec(
    index_id=IndexId.SPATIAL,
    regions=_uniform(_SPATIAL_REGIONS, (20, 50, 30)),
    blend=SPATIAL_BLEND,
    decimals=2,
    bands=(
        Band(">", 1.5, text.SPATIAL["excellent"]),
        Band(">", 1.2, text.SPATIAL["good"]),
        Band(">", 0.5, text.SPATIAL["above_average"]),
        Band(">", -0.5, text.SPATIAL["normal"]),
    ),
    fallback_band=text.SPATIAL["needs_attention"],
    threshold="> +1.2 top 11%; > +1.5 top 7%",
    formula="Spatial_z = Σ[weight × (0.4×z_L + 0.6×z_R)]",
    references=("Ruthsatz 2023 Cortex", "Seghier 2022 Neuroimage"),
    region_labels=_labels(_SPATIAL_REGIONS),
    weights_description="Thickness 20 : Surface Area 50 : Volume 30",
)

_FLUID_REGIONS = (
    ("superiorfrontal", 0.25),
    ("inferiorparietal", 0.20),
    ("superiortemporal", 0.20),
    ("rostralmiddlefrontal", 0.20),
    ("insula", 0.15),
)

FLUID_INTELLIGENCE = IndexSpec(
    index_id=IndexId.FLUID_INTELLIGENCE,
    regions=_uniform(_FLUID_REGIONS, (30, 30, 40)),
    blend=MEAN_OF_HEMISPHERES_HALF_DETAIL,
    decimals=2,
    bands=(
        Band(">", 2.1, text.FLUID_INTELLIGENCE["exceptional"]),
        Band(">", 2.0, text.FLUID_INTELLIGENCE["excellent"]),
        Band(">", 1.5, text.FLUID_INTELLIGENCE["good"]),
        Band(">", 0.5, text.FLUID_INTELLIGENCE["above_average"]),
        Band(">", -0.5, text.FLUID_INTELLIGENCE["normal"]),
    ),
    fallback_band=text.FLUID_INTELLIGENCE["needs_attention"],
    threshold="> +2.0 top 2.5%; > +2.1 top 1.8% (structural maximum estimate)",
    formula="gF_z = Σ[weight × ((z_L + z_R)/2)]",
    references=("Nave 2023 Sci Adv", "Pietschnig 2020 Cereb Cortex", "UKBB 2024"),
    region_labels=_labels(_FLUID_REGIONS),
    weights_description="Thickness 30 : Surface Area 30 : Volume 40",
)
