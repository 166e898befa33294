"""
Severity classifier.

Maps an issue score through the catalog band table for the active
scoring method.
"""

from insight_engine.domain.entities.assessment import Severity
from insight_engine.domain.value_objects.assessment_method import AssessmentMethod
from insight_engine.domain.value_objects.threshold_catalog import SeverityBands, ThresholdCatalog


def classify_with_bands(score: float, bands: SeverityBands) -> Severity:
    """
    Classify a score against one band table.

    The lower bound of each band decides: scores at or above the clinical
    minimum are clinical even past the nominal maximum, and scores below
    the borderline minimum are normal.
    """
    if score >= bands.clinical.min:
        return Severity.CLINICAL
    if score >= bands.borderline.min:
        return Severity.BORDERLINE
    return Severity.NORMAL


class SeverityClassifier:
    def __init__(self, catalog: ThresholdCatalog):
        self._catalog = catalog

    def classify(self, issue_id: str, score: float, method: AssessmentMethod) -> Severity:
        """Classify an issue score; issues missing from the catalog are normal."""
        bands = self._catalog.bands_for(issue_id, method)
        if bands is None:
            return Severity.NORMAL
        return classify_with_bands(score, bands)
