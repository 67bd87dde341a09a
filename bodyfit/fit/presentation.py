"""
Presentation helpers: 화면 표시용 정적 매핑

체형별 색상/핏 코멘트, 입력 항목 라벨, 텍스트 리포트.
분석 로직과 무관. 분석기는 이 모듈을 참조하지 않음.
"""

from __future__ import annotations

from typing import Dict, List, Union

from bodyfit.fit.schema import BodyType, FitAnalysisResult, MeasurementSet


BODY_TYPE_COLORS: Dict[BodyType, str] = {
    BodyType.HOURGLASS: "pink",
    BodyType.PEAR: "green",
    BodyType.APPLE: "red",
    BodyType.RECTANGLE: "blue",
    BodyType.TRIANGLE: "purple",
}
DEFAULT_COLOR = "gray"

FIT_NARRATION: Dict[BodyType, str] = {
    BodyType.HOURGLASS: "Excellent fit! This garment complements your balanced proportions.",
    BodyType.PEAR: "Good fit! The garment balances your lower body proportions nicely.",
    BodyType.APPLE: "Great choice! This style flatters your upper body shape.",
    BodyType.RECTANGLE: "Perfect fit! This garment adds definition to your silhouette.",
    BodyType.TRIANGLE: "Ideal fit! This garment enhances your shoulder line beautifully.",
}
DEFAULT_NARRATION = "This garment fits well with your body type."

# 라벨, 단위, 예시값. 입력 폼 순서
MEASUREMENT_FIELDS_META: Dict[str, Dict[str, str]] = {
    "height":    {"label": "Height", "unit": "cm", "placeholder": "170"},
    "weight":    {"label": "Weight", "unit": "kg", "placeholder": "65"},
    "chest":     {"label": "Chest/Bust", "unit": "cm", "placeholder": "90"},
    "waist":     {"label": "Waist", "unit": "cm", "placeholder": "75"},
    "hips":      {"label": "Hips", "unit": "cm", "placeholder": "95"},
    "shoulders": {"label": "Shoulders", "unit": "cm", "placeholder": "40"},
}


def _as_body_type(body_type: Union[BodyType, str]):
    try:
        return BodyType(body_type)
    except ValueError:
        return None


def body_type_color(body_type: Union[BodyType, str]) -> str:
    return BODY_TYPE_COLORS.get(_as_body_type(body_type), DEFAULT_COLOR)


def fit_narration(body_type: Union[BodyType, str]) -> str:
    return FIT_NARRATION.get(_as_body_type(body_type), DEFAULT_NARRATION)


def completion_message(result: FitAnalysisResult) -> str:
    return f"Your body type has been identified as {result.body_type.value}"


def format_measurements(measurements: MeasurementSet) -> str:
    lines = []
    for name, value in measurements.to_dict().items():
        meta = MEASUREMENT_FIELDS_META[name]
        lines.append(f"  {meta['label']:<11} {value:g} {meta['unit']}")
    return "\n".join(lines)


def format_report(result: FitAnalysisResult) -> str:
    """분석 결과를 여러 줄 텍스트로."""
    lines: List[str] = [
        f"Body type:  {result.body_type.value.capitalize()}",
        f"Confidence: {result.confidence}%",
        "Ideal sizes:",
    ]
    for group, size in result.size_dict.items():
        lines.append(f"  {group.capitalize():<8} {size}")
    lines.append("Recommendations:")
    for i, rec in enumerate(result.recommendations, 1):
        lines.append(f"  {i}. {rec}")
    return "\n".join(lines)
