"""Display labels for contribution frequencies."""

from typing import Dict, List

from compound_interest.domain.accumulation import ContributionFrequency
from compound_interest.schemas.accumulation import FrequencyOption

FREQUENCY_LABELS: Dict[str, Dict[ContributionFrequency, str]] = {
    "es": {
        ContributionFrequency.MONTHLY: "Mensual",
        ContributionFrequency.ANNUALLY: "Anual",
    },
    "en": {
        ContributionFrequency.MONTHLY: "Monthly",
        ContributionFrequency.ANNUALLY: "Annually",
    },
}

FALLBACK_LANGUAGE = "es"


def resolve_language(lang: str, default: str = FALLBACK_LANGUAGE) -> str:
    """Pick a supported language, falling back to ``default`` and then Spanish."""
    if lang in FREQUENCY_LABELS:
        return lang
    if default in FREQUENCY_LABELS:
        return default
    return FALLBACK_LANGUAGE


def frequency_label(frequency: ContributionFrequency, lang: str = FALLBACK_LANGUAGE) -> str:
    """Display label for ``frequency`` in ``lang``."""
    return FREQUENCY_LABELS[resolve_language(lang)][frequency]


def frequency_options(lang: str = FALLBACK_LANGUAGE) -> List[FrequencyOption]:
    """Options in enum order, ready for a dropdown."""
    labels = FREQUENCY_LABELS[resolve_language(lang)]
    return [FrequencyOption(value=frequency, label=labels[frequency]) for frequency in ContributionFrequency]
