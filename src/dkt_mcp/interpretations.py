"""Interpretation, special-feature and recommendation texts.

Band texts are selected by each index's threshold ladder (see
``calculators.Band``); summary texts by the rules in ``analysis``.
"""

# =============================================================================
# Basic Lateralization
# =============================================================================

HANDEDNESS = {
    "extreme_right": "Extreme right-hand dominance (top 10% of the population)",
    "strong_right": "Strong right-hand dominance",
    "moderate_right": "Moderate right-hand dominance",
    "ambidextrous": "Ambidextrous or mixed handedness profile",
    "moderate_left": "Moderate left-hand tendency",
    "strong_left": "Left-handed structural profile",
}

DOMINANT_EYE = {
    "extreme_right": "Extreme right-eye dominance",
    "strong_right": "Strong right-eye dominance",
    "mild_right": "Mild right-eye dominance",
    "balanced": "Balanced ocular dominance",
    "mild_left": "Mild left-eye dominance",
    "strong_left": "Strong left-eye dominance",
}

NOSTRIL = {
    "extreme_right": "Extreme right-nostril olfactory preference",
    "strong_right": "Strong right-nostril preference",
    "mild_right": "Mild right-nostril preference",
    "balanced": "Balanced bilateral olfaction",
    "mild_left": "Mild left-nostril preference",
    "strong_left": "Strong left-nostril preference",
    "extreme_left": "Extreme left-nostril olfactory preference",
}

LANGUAGE_LATERALIZATION = {
    "typical_left": "Typical left-hemisphere language dominance",
    "weak_left": "Weak left-hemisphere language dominance",
    "bilateral": "Bilateral language representation",
    "weak_right": "Weak right-hemisphere language dominance",
    "significant_right": "Significant right-hemisphere language dominance (atypical)",
}

# =============================================================================
# Advanced Functional Lateralization
# =============================================================================

SPATIAL_ATTENTION = {
    "extreme_right": "Extreme right-hemisphere spatial attention dominance",
    "strong_right": "Strong right-hemisphere spatial attention",
    "balanced": "Balanced spatial attention",
    "mild_left": "Mild left-hemisphere spatial attention",
    "strong_left": "Left-hemisphere spatial attention (atypical)",
}

EMOTION = {
    "extreme_right": "Extreme right-hemisphere emotion processing",
    "strong_right": "Strong right-hemisphere emotion processing",
    "balanced": "Balanced emotion processing",
    "mild_left": "Mild left-hemisphere emotion processing",
    "strong_left": "Left-hemisphere emotion processing (associated with depressive tendency)",
}

FACE_RECOGNITION = {
    "extreme_right": "Extreme right-hemisphere face processing (possible super-recognizer)",
    "strong_right": "Strong right-hemisphere face processing",
    "balanced": "Balanced face processing",
    "mild_left": "Mild left-hemisphere face processing",
    "strong_left": "Left-hemisphere face processing (rare)",
}

MUSIC = {
    "extreme_right": "Extreme right-hemisphere music perception (exceptional musical potential)",
    "strong_right": "Strong right-hemisphere music perception",
    "balanced": "Balanced music perception",
    "mild_left": "Mild left-hemisphere music perception",
    "strong_left": "Left-hemisphere music perception (rare)",
}

THEORY_OF_MIND = {
    "extreme_right": "Extreme right-hemisphere mentalizing network",
    "strong_right": "Strong right-hemisphere mentalizing",
    "balanced": "Balanced mentalizing network",
    "mild_left": "Mild left-hemisphere mentalizing",
    "strong_left": "Left-hemisphere mentalizing (atypical)",
}

LOGICAL_REASONING = {
    "extreme_left": "Extreme left-hemisphere logical reasoning dominance (top 1%)",
    "strong_left": "Strong left-hemisphere logical reasoning (top 5%)",
    "mild_left": "Mild left-hemisphere logical reasoning",
    "balanced": "Balanced reasoning network",
    "mild_right": "Mild right-hemisphere reasoning",
    "strong_right": "Right-hemisphere reasoning dominance",
}

MATHEMATICAL_ABILITY = {
    "extreme_left": "Extreme left-hemisphere numerical processing (top 1%)",
    "strong_left": "Strong left-hemisphere numerical processing (top 3%)",
    "mild_left": "Mild left-hemisphere numerical processing",
    "balanced": "Balanced numerical network",
    "mild_right": "Mild right-hemisphere numerical processing",
    "strong_right": "Right-hemisphere (visuospatial) numerical strategy",
}

DYSLEXIA_RISK = {
    "high": "High risk. Marked reduction of left-hemisphere reading network structure; "
    "a professional reading assessment is advised",
    "moderate": "Moderate risk. Reduced leftward asymmetry of the reading network; "
    "monitor reading development",
    "low": "Low risk. Reading network asymmetry within the typical range",
    "very_low": "Very low risk. Pronounced leftward asymmetry of the reading network",
}

# =============================================================================
# Cognitive / Ability
# =============================================================================

OLFACTORY = {
    "excellent": "Excellent olfactory cortex structure",
    "good": "Good olfactory cortex structure",
    "normal": "Olfactory cortex within the normal range",
    "needs_attention": "Olfactory cortex below average; may warrant attention",
}

LANGUAGE = {
    "exceptional": "Exceptional language network structure",
    "excellent": "Excellent language network structure",
    "good": "Good language network structure",
    "normal": "Language network within the normal range",
    "needs_attention": "Language network below average; may warrant attention",
}

READING = {
    "excellent": "Excellent reading network structure",
    "good": "Good reading network structure",
    "normal": "Reading network within the normal range",
    "needs_attention": "Reading network below average; may warrant attention",
}

EMPATHY = {
    "excellent": "Excellent empathy network structure",
    "good": "Very good empathy network structure",
    "above_average": "Above-average empathy network structure",
    "normal": "Empathy network within the normal range",
    "needs_attention": "Empathy network below average; may warrant attention",
}

EXECUTIVE = {
    "exceptional": "Exceptional prefrontal executive network",
    "excellent": "Excellent prefrontal executive network",
    "good": "Good prefrontal executive network",
    "normal": "Executive network within the normal range",
    "needs_attention": "Executive network below average; may warrant attention",
}

SPATIAL = {
    "excellent": "Excellent parietal spatial network",
    "good": "Very good parietal spatial network",
    "above_average": "Above-average parietal spatial network",
    "normal": "Spatial network within the normal range",
    "needs_attention": "Spatial network below average; may warrant attention",
}

FLUID_INTELLIGENCE = {
    "exceptional": "Exceptional structural correlates of fluid intelligence",
    "excellent": "Excellent structural correlates of fluid intelligence",
    "good": "Good structural correlates of fluid intelligence",
    "above_average": "Above-average structural correlates of fluid intelligence",
    "normal": "Fluid intelligence correlates within the normal range",
    "needs_attention": "Fluid intelligence correlates below average",
}

# =============================================================================
# Summary: Special Features
# =============================================================================

SPECIAL_FEATURES = {
    "left_handed": "Left-handed structural profile",
    "extreme_right_handed": "Extreme right-hand dominance",
    "extreme_right_eye": "Extreme right-eye dominance",
    "extreme_left_eye": "Extreme left-eye dominance",
    "extreme_right_nostril": "Extreme right-nostril olfactory preference",
    "extreme_left_nostril": "Extreme left-nostril olfactory preference",
    "right_language_lateralization": "Atypical right-hemisphere language lateralization",
    "bilateral_language": "Bilateral language representation",
    "extreme_right_spatial_attention": "Extreme right-hemisphere spatial attention",
    "extreme_right_emotion": "Extreme right-hemisphere emotion processing",
    "left_emotion_depression": "Left-lateralized emotion processing (depressive tendency marker)",
    "extreme_face_recognition": "Exceptional face recognition lateralization (possible super-recognizer)",
    "extreme_music_talent": "Exceptional music perception lateralization",
    "extreme_mentalization": "Exceptional right-hemisphere mentalizing network",
    "high_dyslexia_risk": "High structural dyslexia risk",
    "moderate_dyslexia_risk": "Moderate structural dyslexia risk",
    "excellent_language": "Top 1% language network structure",
    "excellent_fluid_iq": "Top 2% structural fluid intelligence",
    "extreme_logical_talent": "Exceptional left-hemisphere logical reasoning network",
    "significant_logical_ability": "Significant left-hemisphere logical reasoning network",
    "extreme_math_talent": "Exceptional left-hemisphere mathematical network",
    "significant_math_ability": "Significant left-hemisphere mathematical network",
}

# =============================================================================
# Summary: Recommendations
# =============================================================================

RECOMMENDATIONS = {
    "excellent_performance": "Outstanding structural profile in: {areas}. Consider activities that build on these strengths.",
    "relatively_weak": "Relatively weaker areas: {areas}. Targeted training may help balance development.",
    "language_work": "Strong language network: writing, translation or teaching may suit you well.",
    "reading_research": "Strong reading network: research or editorial work may suit you well.",
    "spatial_work": "Strong spatial network: architecture, engineering or design may suit you well.",
    "empathy_work": "Strong empathy network: counseling, healthcare or education may suit you well.",
    "executive_work": "Strong executive network: management or strategic planning may suit you well.",
    "music_development": "Strong music perception network: consider developing musical skills.",
    "face_recognition_work": "Strong face processing network: roles relying on social recognition may suit you well.",
    "logical_work": "Strong logical reasoning network: programming, law or analysis may suit you well.",
    "math_work": "Strong mathematical network: mathematics, physics or data science may suit you well.",
    "spatial_math_work": "Visuospatial numerical strategy: geometry and visual problem solving may suit you well.",
    "dyslexia_assessment": "Consider a professional reading assessment and evidence-based reading support.",
    "emotional_health": "Left-lateralized emotion processing: attend to emotional well-being and seek support when needed.",
    "balanced_development": "Balanced structural development across domains. Keep up a varied range of activities.",
}
