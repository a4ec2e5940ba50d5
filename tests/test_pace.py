from datetime import timedelta

import pytest

from readtrack.engine.pace import (
    activity_span_days,
    calculate_user_listening_pace,
    calculate_user_pace,
)
from readtrack.models.enums import BookFormat, CalculationMethod
from readtrack.models.kb import PaceConfig
from tests.conftest import TODAY, at, make_deadline


class TestCalculateUserPace:
    def test_no_deadlines_falls_back(self):
        result = calculate_user_pace([])
        assert result.average_pace == 25
        assert result.reading_days_count == 0
        assert result.is_reliable is False
        assert result.calculation_method == CalculationMethod.DEFAULT_FALLBACK

    def test_span_based_average(self, physical_deadline):
        # 25 pages on each of 4 days (6..3 days ago): 100 pages over a 3-day span
        result = calculate_user_pace([physical_deadline])
        assert result.reading_days_count == 4
        assert result.is_reliable is True
        assert result.calculation_method == CalculationMethod.RECENT_DATA
        assert result.average_pace == pytest.approx(100 / 3)

    def test_two_days_is_fallback_three_is_recent(self):
        two = make_deadline(progress=[(10, at(5)), (20, at(4)), (30, at(3))])
        three = make_deadline(progress=[(10, at(5)), (20, at(4)), (30, at(3)), (40, at(2))])

        before = calculate_user_pace([two])
        after = calculate_user_pace([three])

        assert before.reading_days_count == 2
        assert before.calculation_method == CalculationMethod.DEFAULT_FALLBACK
        assert before.is_reliable is False
        assert after.reading_days_count == 3
        assert after.calculation_method == CalculationMethod.RECENT_DATA
        assert after.is_reliable is True
        assert after.average_pace == pytest.approx(30 / 2)

    def test_audio_does_not_change_reading_pace(self, physical_deadline, audio_deadline):
        alone = calculate_user_pace([physical_deadline])
        mixed = calculate_user_pace([physical_deadline, audio_deadline])
        assert mixed.average_pace == alone.average_pace
        assert mixed.reading_days_count == alone.reading_days_count

    def test_lookback_anchored_on_latest_snapshot(self):
        # Everything is old relative to today, but recent relative to itself
        deadline = make_deadline(progress=[(10, at(40)), (20, at(39)), (30, at(38)), (40, at(37))])
        result = calculate_user_pace([deadline])
        assert result.calculation_method == CalculationMethod.RECENT_DATA
        assert result.reading_days_count == 3

    def test_entries_older_than_lookback_dropped(self):
        old = make_deadline(progress=[(0, at(40)), (200, at(39))])
        recent = make_deadline(progress=[(10, at(4)), (20, at(3)), (30, at(2)), (40, at(1))])
        result = calculate_user_pace([old, recent])
        assert result.reading_days_count == 3
        assert result.average_pace == pytest.approx(30 / 2)

    def test_negative_days_flow_into_average(self):
        deadline = make_deadline(progress=[(10, at(4)), (40, at(3)), (70, at(2)), (60, at(1))])
        result = calculate_user_pace([deadline])
        # 30 + 30 - 10 over a 2-day span
        assert result.average_pace == pytest.approx(50 / 2)

    def test_custom_config(self):
        config = PaceConfig(reliable_min_days=5, default_reading_pace=40)
        result = calculate_user_pace([make_deadline(progress=[(10, at(3)), (20, at(2))])], config)
        assert result.average_pace == 40
        assert result.calculation_method == CalculationMethod.DEFAULT_FALLBACK


class TestCalculateUserListeningPace:
    def test_no_data_is_zero(self):
        result = calculate_user_listening_pace([])
        assert result.average_pace == 0
        assert result.listening_days_count == 0
        assert result.is_reliable is False
        assert result.calculation_method == CalculationMethod.DEFAULT_FALLBACK

    def test_single_day_uses_that_day(self):
        deadline = make_deadline(
            progress=[(100, at(2, hour=8)), (145, at(2, hour=18))], format=BookFormat.AUDIO
        )
        result = calculate_user_listening_pace([deadline])
        assert result.listening_days_count == 1
        assert result.calculation_method == CalculationMethod.RECENT_DATA
        assert result.is_reliable is False
        assert result.average_pace == 45

    def test_non_adjacent_days_divide_by_span(self):
        # 30 minutes on day 0 and 30 minutes on day 3, nothing between
        deadline = make_deadline(
            progress=[
                (100, at(6, hour=8)),
                (130, at(6, hour=18)),
                (130, at(3, hour=8)),
                (160, at(3, hour=18)),
            ],
            format=BookFormat.AUDIO,
        )
        result = calculate_user_listening_pace([deadline])
        assert result.listening_days_count == 2
        assert result.average_pace == pytest.approx(60 / 3)

    def test_three_days_is_reliable(self):
        deadline = make_deadline(
            progress=[(0, at(4)), (30, at(3)), (60, at(2)), (90, at(1))], format=BookFormat.AUDIO
        )
        result = calculate_user_listening_pace([deadline])
        assert result.listening_days_count == 3
        assert result.is_reliable is True
        assert result.average_pace == pytest.approx(90 / 2)

    def test_seed_excluded_from_pace(self):
        deadline = make_deadline(
            progress=[(0, at(3)), (400, at(2)), (440, at(1))], format=BookFormat.AUDIO
        )
        result = calculate_user_listening_pace([deadline])
        assert result.listening_days_count == 1
        assert result.average_pace == 40


class TestActivitySpan:
    def test_empty_is_one(self):
        assert activity_span_days([]) == 1

    def test_single_day_is_one(self):
        assert activity_span_days([TODAY]) == 1

    def test_span(self):
        assert activity_span_days([TODAY, TODAY - timedelta(days=3)]) == 3
