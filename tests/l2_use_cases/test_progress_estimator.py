"""Tests for the synthetic progress estimator."""

from __future__ import annotations

import pytest

from whisper_gui.l2_use_cases.progress_estimator import (
    DEFAULT_COMPLEXITY,
    CancellationToken,
    ProgressEstimator,
    displayed_fraction,
    eased_fraction,
    estimate_total_seconds,
    model_complexity,
)


class TestEasing:
    def test_start(self):
        assert eased_fraction(0.0) == 0.0

    def test_phase_two_starts_at_point_two(self):
        assert eased_fraction(0.2) == 0.2

    def test_phase_three_starts_at_point_eight(self):
        assert eased_fraction(0.8) == 0.8

    def test_end_of_curve(self):
        assert eased_fraction(1.0) == pytest.approx(0.83)

    def test_first_phase_is_front_loaded(self):
        assert eased_fraction(0.1) == pytest.approx(0.05)

    def test_monotonic_within_phases(self):
        for lo, hi in [(0.0, 0.19), (0.2, 0.79), (0.8, 1.0)]:
            assert eased_fraction(lo) < eased_fraction(hi)

    @pytest.mark.parametrize('linear', [i / 100 for i in range(101)])
    def test_displayed_never_exceeds_cap(self, linear):
        assert displayed_fraction(linear) <= 0.95

    def test_custom_cap(self):
        assert displayed_fraction(0.8, cap=0.5) == 0.5


class TestComplexity:
    @pytest.mark.parametrize(
        ('size', 'factor'),
        [('tiny', 0.1), ('base', 0.2), ('small', 0.4), ('medium', 0.8), ('large', 1.2)],
    )
    def test_table(self, size, factor):
        assert model_complexity(size) == factor
        assert model_complexity(f'openai_whisper-{size}') == factor

    @pytest.mark.parametrize('model_id', ['large-v3', 'openai_whisper-distil', ''])
    def test_unknown_defaults(self, model_id):
        assert model_complexity(model_id) == DEFAULT_COMPLEXITY == 0.3


class TestTotalSeconds:
    def test_duration_times_complexity(self):
        assert estimate_total_seconds(100.0, 'openai_whisper-small') == pytest.approx(40.0)

    @pytest.mark.parametrize('duration', [None, 0.0, -5.0])
    def test_unknown_duration_uses_fallback(self, duration):
        assert estimate_total_seconds(duration, 'base') == pytest.approx(12.0)

    def test_custom_fallback(self):
        assert estimate_total_seconds(None, 'tiny', fallback_duration=30.0) == pytest.approx(3.0)


class TestRun:
    @pytest.mark.asyncio
    async def test_emits_every_step_below_cap(self):
        sleeps: list[float] = []

        async def fake_sleep(seconds: float) -> None:
            sleeps.append(seconds)

        estimator = ProgressEstimator(10.0, 'openai_whisper-base', steps=10, sleep=fake_sleep)
        emitted: list[float] = []
        await estimator.run(emitted.append, CancellationToken())

        assert len(emitted) == 10
        assert emitted[0] == 0.0
        assert emitted == sorted(emitted)
        assert max(emitted) < 1.0
        assert sleeps == [pytest.approx(0.2)] * 10

    @pytest.mark.asyncio
    async def test_cancel_stops_before_next_emit(self):
        token = CancellationToken()
        emitted: list[float] = []

        async def cancelling_sleep(_seconds: float) -> None:
            if len(emitted) == 3:
                token.cancel()

        estimator = ProgressEstimator(10.0, 'base', steps=100, sleep=cancelling_sleep)
        await estimator.run(emitted.append, token)

        assert len(emitted) == 3

    @pytest.mark.asyncio
    async def test_pre_cancelled_emits_nothing(self):
        token = CancellationToken()
        token.cancel()
        emitted: list[float] = []

        async def no_sleep(_seconds: float) -> None:
            pass

        await ProgressEstimator(None, 'base', sleep=no_sleep).run(emitted.append, token)
        assert emitted == []

    def test_fraction_at_boundaries(self):
        estimator = ProgressEstimator(60.0, 'base', steps=100)
        assert estimator.fraction_at(20) == 0.2
        assert estimator.fraction_at(80) == 0.8
        assert estimator.total_seconds == pytest.approx(12.0)
        assert estimator.step_duration == pytest.approx(0.12)
