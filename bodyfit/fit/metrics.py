"""
Body Fit Evaluation Metrics

체형 판정 정확도, 사이즈 추천 정확도, 혼동 행렬.
라벨링된 측정치 세트로 규칙 테이블을 점검할 때 사용.
"""

from __future__ import annotations

from typing import Dict, List, Mapping, Sequence, Union

import numpy as np

from bodyfit.fit.schema import BodyType, GarmentGroup


# ──────────────────────────────────────────────
# 1. 체형 판정 정확도
# ──────────────────────────────────────────────

def body_type_accuracy(
    pred_types: Sequence[Union[BodyType, str]],
    gt_types: Sequence[Union[BodyType, str]],
) -> Dict[str, float]:
    """
    체형별 정확도 + 전체 정확도.

    Args:
        pred_types: 예측 체형 목록
        gt_types: GT 체형 목록 (같은 길이)

    Returns:
        {체형: 정확도} (GT에 등장한 체형만) + {"overall": accuracy}
    """
    if len(pred_types) != len(gt_types):
        raise ValueError("pred_types and gt_types must have the same length")

    correct: Dict[str, int] = {}
    total: Dict[str, int] = {}
    for p, g in zip(pred_types, gt_types):
        key = BodyType(g).value
        total[key] = total.get(key, 0) + 1
        correct[key] = correct.get(key, 0) + (BodyType(p) == BodyType(g))

    results = {k: correct[k] / total[k] for k in total}
    results["overall"] = sum(correct.values()) / max(len(gt_types), 1)
    return results


def body_type_confusion(
    pred_types: Sequence[Union[BodyType, str]],
    gt_types: Sequence[Union[BodyType, str]],
) -> np.ndarray:
    """
    5×5 혼동 행렬 (행: GT, 열: 예측). 순서는 BodyType 정의 순서.
    """
    if len(pred_types) != len(gt_types):
        raise ValueError("pred_types and gt_types must have the same length")

    order = list(BodyType)
    index = {bt: i for i, bt in enumerate(order)}
    matrix = np.zeros((len(order), len(order)), dtype=np.int64)
    for p, g in zip(pred_types, gt_types):
        matrix[index[BodyType(g)], index[BodyType(p)]] += 1
    return matrix


# ──────────────────────────────────────────────
# 2. 사이즈 추천 정확도
# ──────────────────────────────────────────────

def size_recommendation_accuracy(
    pred_sizes: List[Mapping[str, str]],
    gt_sizes: List[Mapping[str, str]],
) -> Dict[str, float]:
    """
    의류 그룹별 사이즈 일치율.

    Args:
        pred_sizes, gt_sizes: [{"tops": "M", "bottoms": "S", "dresses": "M"}, ...]

    Returns:
        {그룹: 정확도} + {"overall": 전체 그룹 평균}
    """
    if len(pred_sizes) != len(gt_sizes):
        raise ValueError("pred_sizes and gt_sizes must have the same length")

    results = {}
    for group in GarmentGroup:
        matches = np.array(
            [p.get(group.value) == g.get(group.value) for p, g in zip(pred_sizes, gt_sizes)],
            dtype=np.float64,
        )
        results[group.value] = float(matches.mean()) if matches.size else 0.0
    results["overall"] = float(np.mean([results[g.value] for g in GarmentGroup]))
    return results
