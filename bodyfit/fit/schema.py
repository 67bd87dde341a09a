"""
Body Fit Analyzer: Core Data Schemas

측정치 스키마 정의: 신체 치수 입력, 체형, Fit Analysis 결과.
dataclass 기반으로 유효성 검증 + 직렬화(key-value 레코드) 제공.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Tuple


# ──────────────────────────────────────────────
# Enums
# ──────────────────────────────────────────────

class BodyType(str, Enum):
    HOURGLASS = "hourglass"
    PEAR = "pear"
    APPLE = "apple"
    RECTANGLE = "rectangle"
    TRIANGLE = "triangle"


class SizeLabel(str, Enum):
    S = "S"
    M = "M"
    L = "L"


class GarmentGroup(str, Enum):
    TOPS = "tops"
    BOTTOMS = "bottoms"
    DRESSES = "dresses"


# ──────────────────────────────────────────────
# Field Keys (입력 항목)
# ──────────────────────────────────────────────

# 폼 입력 순서. 누락 검사도 이 순서로 진행.
MEASUREMENT_FIELDS: Tuple[str, ...] = (
    "height", "weight", "chest", "waist", "hips", "shoulders",
)

# 체형별 스타일 추천 개수
RECOMMENDATION_COUNT = 4


# ──────────────────────────────────────────────
# Errors
# ──────────────────────────────────────────────

class ValidationError(ValueError):
    """입력 치수가 누락되었거나 숫자가 아니거나 0 이하일 때."""

    def __init__(self, field_name: str, reason: str):
        self.field = field_name
        self.reason = reason
        super().__init__(f"{field_name}: {reason}")


# ──────────────────────────────────────────────
# Data Classes
# ──────────────────────────────────────────────

@dataclass(frozen=True)
class MeasurementSet:
    """사용자 신체 측정치. 여섯 항목 모두 필수."""
    height: float     # cm
    weight: float     # kg
    chest: float      # cm (둘레)
    waist: float      # cm (둘레)
    hips: float       # cm (둘레)
    shoulders: float  # cm

    def validate(self) -> "MeasurementSet":
        """모든 항목이 유한한 양수인지 확인. 실패 시 ValidationError."""
        for name in MEASUREMENT_FIELDS:
            _check_positive(name, getattr(self, name))
        return self

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "MeasurementSet":
        """
        key-value 레코드에서 생성.

        숫자 또는 숫자 문자열 모두 허용 (폼 원본 문자열이 캐시된 경우).
        """
        values = {}
        for name in MEASUREMENT_FIELDS:
            if name not in data or data[name] is None:
                raise ValidationError(name, "missing")
            values[name] = _coerce_number(name, data[name])
        return cls(**values).validate()

    @classmethod
    def from_form(cls, form: Mapping[str, Optional[str]]) -> "MeasurementSet":
        """
        폼 입력(문자열)에서 생성.

        빈 칸/공백만 있는 항목은 누락으로 처리. 첫 번째 누락 항목을 보고.
        """
        for name in MEASUREMENT_FIELDS:
            raw = form.get(name)
            if raw is None or not str(raw).strip():
                raise ValidationError(name, "missing")
        return cls.from_dict({name: str(form[name]).strip() for name in MEASUREMENT_FIELDS})

    def to_dict(self) -> Dict[str, float]:
        return {name: getattr(self, name) for name in MEASUREMENT_FIELDS}


@dataclass(frozen=True)
class IdealSizes:
    """의류 그룹별 추천 사이즈."""
    tops: SizeLabel
    bottoms: SizeLabel
    dresses: SizeLabel

    def to_dict(self) -> Dict[str, str]:
        return {
            GarmentGroup.TOPS.value: self.tops.value,
            GarmentGroup.BOTTOMS.value: self.bottoms.value,
            GarmentGroup.DRESSES.value: self.dresses.value,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, str]) -> "IdealSizes":
        return cls(
            tops=SizeLabel(data[GarmentGroup.TOPS.value]),
            bottoms=SizeLabel(data[GarmentGroup.BOTTOMS.value]),
            dresses=SizeLabel(data[GarmentGroup.DRESSES.value]),
        )


@dataclass(frozen=True)
class FitAnalysisResult:
    """전체 체형 분석 결과. 생성 후 변경 불가."""
    body_type: BodyType
    confidence: int                      # 0~100 (현재는 고정값)
    ideal_sizes: IdealSizes
    recommendations: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def size_dict(self) -> Dict[str, str]:
        return self.ideal_sizes.to_dict()

    def to_dict(self) -> Dict[str, Any]:
        """캐시 레코드 형식 (bodyType / idealSizes 키 이름 유지)."""
        return {
            "bodyType": self.body_type.value,
            "confidence": self.confidence,
            "idealSizes": self.ideal_sizes.to_dict(),
            "recommendations": list(self.recommendations),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "FitAnalysisResult":
        """캐시 레코드 → 결과. 형식이 어긋나면 ValueError (KeyError: 키 누락)."""
        return cls(
            body_type=BodyType(data["bodyType"]),
            confidence=_check_confidence(data["confidence"]),
            ideal_sizes=IdealSizes.from_dict(data["idealSizes"]),
            recommendations=_check_recommendations(data["recommendations"]),
        )


# ──────────────────────────────────────────────
# Helper functions
# ──────────────────────────────────────────────

def _coerce_number(name: str, value: Any) -> float:
    """숫자/숫자 문자열 → float. bool은 거부."""
    if isinstance(value, bool):
        raise ValidationError(name, "not a number")
    if isinstance(value, str):
        value = value.strip()
        if not value:
            raise ValidationError(name, "missing")
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ValidationError(name, f"not a number: {value!r}") from None


def _check_positive(name: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(name, "not a number")
    if math.isnan(value) or math.isinf(value):
        raise ValidationError(name, "not a finite number")
    if value <= 0:
        raise ValidationError(name, "must be positive")


def _check_confidence(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"confidence: not a number: {value!r}")
    if not 0 <= value <= 100:
        raise ValueError(f"confidence: out of range 0..100: {value!r}")
    return int(value)


def _check_recommendations(value: Any) -> Tuple[str, ...]:
    # 체형별 추천은 항상 4개
    if not isinstance(value, (list, tuple)):
        raise ValueError(f"recommendations: expected a list, got {type(value).__name__}")
    if len(value) != RECOMMENDATION_COUNT or not all(isinstance(v, str) for v in value):
        raise ValueError(f"recommendations: expected {RECOMMENDATION_COUNT} strings")
    return tuple(value)
