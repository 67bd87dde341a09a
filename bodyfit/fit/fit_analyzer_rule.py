"""
Rule-Based Fit Analyzer: 결정적 규칙 테이블

가슴/허리/엉덩이 둘레 비교로 체형 판정 + 의류 그룹별 사이즈 추천 + 스타일 추천.
학습 데이터 불필요. 규칙 순서가 곧 결과이므로 순서를 바꾸지 말 것.
"""

from __future__ import annotations

from typing import Dict, List, Tuple, Union

from bodyfit.core.logging import get_logger
from bodyfit.fit.schema import (
    BodyType,
    FitAnalysisResult,
    IdealSizes,
    MeasurementSet,
    SizeLabel,
)


logger = get_logger(__name__)


# 입력 품질과 무관한 고정값
CONFIDENCE = 92

# apple 판정: waist >= chest × 0.8
APPLE_WAIST_TO_CHEST = 0.8


# ──────────────────────────────────────────────
# Size Breakpoints (strict >, 내림차순)
# ──────────────────────────────────────────────
# 각 값: [(기준값, 사이즈), ...]. 기준값 초과 시 해당 사이즈, 모두 아니면 S

SIZE_BREAKPOINTS = {
    "tops":    [(95.0, SizeLabel.L), (85.0, SizeLabel.M)],   # chest
    "bottoms": [(100.0, SizeLabel.L), (90.0, SizeLabel.M)],  # hips
    "dresses": [(100.0, SizeLabel.L), (90.0, SizeLabel.M)],  # max(chest, hips)
}

_DEFAULT_SIZE = SizeLabel.S


# ──────────────────────────────────────────────
# Recommendation Table (읽기 전용)
# ──────────────────────────────────────────────

RECOMMENDATIONS: Dict[BodyType, Tuple[str, ...]] = {
    BodyType.HOURGLASS: (
        "Emphasize your waist with fitted tops and high-waisted bottoms",
        "Wrap dresses and belted styles work perfectly for your shape",
        "Avoid boxy or oversized clothing that hides your natural curves",
        "Choose V-necks and scoop necks to highlight your proportions",
    ),
    BodyType.PEAR: (
        "Balance your silhouette with statement sleeves or shoulder details",
        "Choose darker colors for bottoms and brighter colors for tops",
        "A-line dresses and skirts are ideal for your body type",
        "Boot-cut or straight-leg jeans work better than skinny styles",
    ),
    BodyType.APPLE: (
        "Choose tops that flow away from your midsection",
        "Empire waists and tunic styles are very flattering",
        "Draw attention upward with statement necklaces or earrings",
        "Avoid tight-fitting clothes around your waist area",
    ),
    BodyType.RECTANGLE: (
        "Create curves with peplum tops and fit-and-flare dresses",
        "Layer clothing to add dimension to your silhouette",
        "Belts can help create the illusion of a defined waist",
        "Experiment with different textures and patterns",
    ),
    BodyType.TRIANGLE: (
        "Focus on balancing your upper and lower body proportions",
        "Choose tops with embellishments or bright colors",
        "Straight-leg or bootcut pants work well for your shape",
        "V-necks and scoop necks help broaden your shoulder line",
    ),
}


def classify_body_type(chest: float, waist: float, hips: float) -> BodyType:
    """
    체형 판정. 위에서부터 첫 번째로 맞는 규칙이 이김.

    Args:
        chest, waist, hips: 둘레 (cm)

    Returns:
        BodyType (기본값 RECTANGLE)
    """
    if chest > waist and hips > waist:
        return BodyType.HOURGLASS
    if hips > chest and hips > waist:
        return BodyType.PEAR
    if chest > hips and waist >= chest * APPLE_WAIST_TO_CHEST:
        return BodyType.APPLE
    if hips > chest:
        return BodyType.TRIANGLE
    return BodyType.RECTANGLE


def size_for(group: str, value: float) -> SizeLabel:
    """그룹별 기준표로 사이즈 조회."""
    for threshold, label in SIZE_BREAKPOINTS[group]:
        if value > threshold:
            return label
    return _DEFAULT_SIZE


def derive_ideal_sizes(chest: float, hips: float) -> IdealSizes:
    """상의는 가슴, 하의는 엉덩이, 원피스는 둘 중 큰 값 기준."""
    return IdealSizes(
        tops=size_for("tops", chest),
        bottoms=size_for("bottoms", hips),
        dresses=size_for("dresses", max(chest, hips)),
    )


def recommendations(body_type: Union[BodyType, str]) -> List[str]:
    """체형별 스타일 추천 4개 (순서 고정). 알 수 없는 체형이면 ValueError."""
    return list(RECOMMENDATIONS[BodyType(body_type)])


class RuleBasedFitAnalyzer:
    """
    규칙 기반 Fit Analyzer.

    상태 없음. 여러 스레드/코루틴에서 동시에 호출해도 안전.

    사용법:
        analyzer = RuleBasedFitAnalyzer()
        result = analyzer.analyze(measurements)
    """

    confidence = CONFIDENCE

    def analyze(self, measurements: MeasurementSet) -> FitAnalysisResult:
        """
        단일 측정치에 대한 체형 분석.

        Args:
            measurements: 신체 치수 (여섯 항목 모두 필수)

        Returns:
            FitAnalysisResult

        Raises:
            ValidationError: 누락/비숫자/0 이하 항목이 있을 때
        """
        measurements.validate()
        chest, waist, hips = measurements.chest, measurements.waist, measurements.hips

        body_type = classify_body_type(chest, waist, hips)
        sizes = derive_ideal_sizes(chest, hips)

        logger.debug(
            "Body type classified",
            body_type=body_type.value,
            chest=chest,
            waist=waist,
            hips=hips,
            sizes=sizes.to_dict(),
        )

        return FitAnalysisResult(
            body_type=body_type,
            confidence=self.confidence,
            ideal_sizes=sizes,
            recommendations=RECOMMENDATIONS[body_type],
        )


_default_analyzer = RuleBasedFitAnalyzer()


def analyze(measurements: MeasurementSet) -> FitAnalysisResult:
    """모듈 레벨 단축 함수."""
    return _default_analyzer.analyze(measurements)
