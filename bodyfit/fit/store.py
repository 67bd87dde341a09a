"""
Measurement Store: 마지막 입력/결과 캐시

두 개의 독립 키(bodyMeasurements, bodyAnalysis)에 저장. best-effort:
저장/로드 사이에 원자성 보장 없음. 한쪽만 있어도 정상 동작해야 함.
"""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Optional

from bodyfit.config.settings import Settings
from bodyfit.core.logging import get_logger
from bodyfit.fit.schema import FitAnalysisResult, MeasurementSet


logger = get_logger(__name__)

MEASUREMENTS_KEY = "bodyMeasurements"
RESULT_KEY = "bodyAnalysis"


class MeasurementStore(ABC):
    """
    key-value 저장소 위의 입력/결과 캐시.

    하위 클래스는 _get/_set/_delete 세 개만 구현하면 됨.
    """

    def save(self, measurements: MeasurementSet, result: FitAnalysisResult) -> None:
        """입력과 결과를 각각의 키에 저장 (트랜잭션 아님)."""
        self._set(MEASUREMENTS_KEY, measurements.to_dict())
        self._set(RESULT_KEY, result.to_dict())
        logger.debug("Analysis cached", body_type=result.body_type.value)

    def load_measurements(self) -> Optional[MeasurementSet]:
        raw = self._get(MEASUREMENTS_KEY)
        if raw is None:
            return None
        try:
            return MeasurementSet.from_dict(raw)
        except (TypeError, ValueError) as e:
            logger.warning("Discarding invalid cached measurements", error=str(e))
            return None

    def load_result(self) -> Optional[FitAnalysisResult]:
        raw = self._get(RESULT_KEY)
        if raw is None:
            return None
        try:
            return FitAnalysisResult.from_dict(raw)
        except (KeyError, TypeError, ValueError) as e:
            logger.warning("Discarding invalid cached result", error=str(e))
            return None

    def clear(self) -> None:
        self._delete(MEASUREMENTS_KEY)
        self._delete(RESULT_KEY)
        logger.debug("Measurement store cleared")

    @abstractmethod
    def _get(self, key: str) -> Optional[Any]:
        ...

    @abstractmethod
    def _set(self, key: str, value: Any) -> None:
        ...

    @abstractmethod
    def _delete(self, key: str) -> None:
        ...


class InMemoryMeasurementStore(MeasurementStore):
    """dict 기반 저장소. 테스트/임베딩용."""

    def __init__(self):
        self._data: Dict[str, Any] = {}

    def _get(self, key: str) -> Optional[Any]:
        value = self._data.get(key)
        # 저장된 레코드가 외부에서 변형되지 않도록 JSON 왕복 복사
        return json.loads(json.dumps(value)) if value is not None else None

    def _set(self, key: str, value: Any) -> None:
        self._data[key] = json.loads(json.dumps(value))

    def _delete(self, key: str) -> None:
        self._data.pop(key, None)


class JsonFileMeasurementStore(MeasurementStore):
    """
    JSON 파일 하나에 두 키를 보관하는 로컬 캐시.

    읽기 실패(파일 없음/손상)는 빈 저장소로, 쓰기 실패는 경고 로그로 처리.
    """

    def __init__(self, path: Path):
        self.path = Path(path)

    def _read_all(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning("Store file unreadable, ignoring", path=str(self.path), error=str(e))
            return {}
        if not isinstance(data, dict):
            logger.warning("Store file has unexpected layout, ignoring", path=str(self.path))
            return {}
        return data

    def _write_all(self, data: Dict[str, Any]) -> None:
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(json.dumps(data, indent=2), encoding="utf-8")
            tmp.replace(self.path)
        except OSError as e:
            logger.warning("Store write failed", path=str(self.path), error=str(e))
            try:
                tmp.unlink(missing_ok=True)
            except OSError as cleanup_error:
                logger.warning("Store temp file not removed", path=str(tmp), error=str(cleanup_error))

    def _get(self, key: str) -> Optional[Any]:
        return self._read_all().get(key)

    def _set(self, key: str, value: Any) -> None:
        data = self._read_all()
        data[key] = value
        self._write_all(data)

    def _delete(self, key: str) -> None:
        data = self._read_all()
        if key in data:
            del data[key]
            self._write_all(data)


def create_store(settings: Settings) -> MeasurementStore:
    """설정의 store_backend에 맞는 저장소 생성."""
    if settings.store_backend == "memory":
        return InMemoryMeasurementStore()
    return JsonFileMeasurementStore(settings.store_path)
