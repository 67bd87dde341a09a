"""
Analysis Session: 비동기 래퍼

UI 스레드와 분석을 분리하기 위한 얇은 async 계층.
제출 순서대로 한 번에 하나씩만 분석 (asyncio.Lock은 FIFO로 깨움).
지연(delay_sec)은 화면 연출용이며 분석기 자체는 동기/즉시 반환.
"""

from __future__ import annotations

import asyncio
import itertools
from typing import Optional

from bodyfit.config.settings import Settings
from bodyfit.core.logging import get_logger
from bodyfit.fit.fit_analyzer_rule import RuleBasedFitAnalyzer
from bodyfit.fit.schema import FitAnalysisResult, MeasurementSet
from bodyfit.fit.store import MeasurementStore, create_store


logger = get_logger(__name__)


class AnalysisSession:
    """
    측정치 제출 → 분석 → (선택) 저장.

    사용법:
        session = AnalysisSession(store=InMemoryMeasurementStore())
        result = await session.submit(measurements)
    """

    def __init__(
        self,
        store: Optional[MeasurementStore] = None,
        delay_sec: float = 0.0,
        analyzer: Optional[RuleBasedFitAnalyzer] = None,
    ):
        if delay_sec < 0:
            raise ValueError("delay_sec must be >= 0")
        self.store = store
        self.delay_sec = delay_sec
        self.analyzer = analyzer or RuleBasedFitAnalyzer()
        self.last_result: Optional[FitAnalysisResult] = None
        self._lock = asyncio.Lock()
        self._counter = itertools.count(1)

    @classmethod
    def from_settings(cls, settings: Settings) -> "AnalysisSession":
        """설정의 저장소 백엔드와 연출용 지연을 사용."""
        return cls(store=create_store(settings), delay_sec=settings.analysis_delay_sec)

    @property
    def in_flight(self) -> bool:
        return self._lock.locked()

    async def submit(self, measurements: MeasurementSet) -> FitAnalysisResult:
        """
        측정치 하나를 분석.

        검증은 대기열에 들어가기 전에 수행. 잘못된 입력은 즉시 ValidationError.
        """
        measurements.validate()
        submission_id = next(self._counter)

        async with self._lock:
            log = logger.bind(submission_id=submission_id)
            if self.delay_sec:
                await asyncio.sleep(self.delay_sec)
            result = self.analyzer.analyze(measurements)
            if self.store is not None:
                await asyncio.to_thread(self.store.save, measurements, result)
            self.last_result = result
            log.info("Analysis complete", body_type=result.body_type.value)
            return result
