"""
Body Fit Analyzer: bodyfit.fit package
"""

from bodyfit.fit.schema import (
    BodyType,
    FitAnalysisResult,
    GarmentGroup,
    IdealSizes,
    MeasurementSet,
    SizeLabel,
    ValidationError,
)
from bodyfit.fit.fit_analyzer_rule import RuleBasedFitAnalyzer, analyze, recommendations
from bodyfit.fit.store import (
    InMemoryMeasurementStore,
    JsonFileMeasurementStore,
    MeasurementStore,
    create_store,
)
from bodyfit.fit.session import AnalysisSession
