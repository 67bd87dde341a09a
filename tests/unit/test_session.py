"""
Tests for the async analysis session.
"""

import asyncio

import pytest

from bodyfit.config.settings import get_settings_for_testing
from bodyfit.fit.fit_analyzer_rule import RuleBasedFitAnalyzer, analyze
from bodyfit.fit.schema import BodyType, ValidationError
from bodyfit.fit.session import AnalysisSession
from bodyfit.fit.store import InMemoryMeasurementStore


class RecordingAnalyzer(RuleBasedFitAnalyzer):
    """Tracks concurrency and call order."""

    def __init__(self):
        self.calls = []
        self.active = 0
        self.max_active = 0

    def analyze(self, measurements):
        self.active += 1
        self.max_active = max(self.max_active, self.active)
        try:
            self.calls.append(measurements.chest)
            return super().analyze(measurements)
        finally:
            self.active -= 1


class TestAnalysisSession:

    @pytest.mark.asyncio
    async def test_submit_returns_same_result_as_analyzer(self, hourglass_measurements):
        session = AnalysisSession()
        result = await session.submit(hourglass_measurements)

        assert result == analyze(hourglass_measurements)
        assert session.last_result == result
        assert not session.in_flight

    @pytest.mark.asyncio
    async def test_submit_saves_to_store(self, memory_store, hourglass_measurements):
        session = AnalysisSession(store=memory_store)
        result = await session.submit(hourglass_measurements)

        assert memory_store.load_measurements() == hourglass_measurements
        assert memory_store.load_result() == result

    @pytest.mark.asyncio
    async def test_invalid_input_rejected_before_queue(self, make_measurements, memory_store):
        session = AnalysisSession(store=memory_store)
        with pytest.raises(ValidationError):
            await session.submit(make_measurements(chest=-1))

        assert memory_store.load_result() is None
        assert session.last_result is None

    @pytest.mark.asyncio
    async def test_results_follow_submission_order(self, make_measurements):
        analyzer = RecordingAnalyzer()
        session = AnalysisSession(delay_sec=0.01, analyzer=analyzer)
        chests = [100, 80, 90, 85]

        results = await asyncio.gather(*[
            session.submit(make_measurements(chest=c, waist=70, hips=95)) for c in chests
        ])

        assert analyzer.calls == chests
        assert analyzer.max_active == 1
        assert session.last_result == results[-1]

    @pytest.mark.asyncio
    async def test_in_flight_during_delay(self, hourglass_measurements):
        session = AnalysisSession(delay_sec=0.05)
        task = asyncio.create_task(session.submit(hourglass_measurements))
        await asyncio.sleep(0.01)

        assert session.in_flight
        result = await task
        assert result.body_type == BodyType.HOURGLASS
        assert not session.in_flight

    def test_negative_delay_rejected(self):
        with pytest.raises(ValueError):
            AnalysisSession(delay_sec=-1)

    def test_from_settings(self):
        settings = get_settings_for_testing(store_backend="memory", analysis_delay_sec=0.25)
        session = AnalysisSession.from_settings(settings)

        assert session.delay_sec == 0.25
        assert isinstance(session.store, InMemoryMeasurementStore)
