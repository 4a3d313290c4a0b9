"""Tests for productivity outcomes and cost savings."""
import pytest

from wellness_outcomes.services.analytics_service.productivity import (
    calculate_productivity_outcomes,
    presenteeism_hours,
    project_cost_savings,
)


@pytest.fixture
def two_users(user_factory):
    return [
        user_factory(user_id="a", absenteeism=(10, 5), presenteeism=(30, 20)),
        user_factory(user_id="b", absenteeism=(20, 10), presenteeism=(40, 30)),
    ]


class TestWorkLossDeltas:
    """Tests for absenteeism and presenteeism reductions."""

    def test_absenteeism(self, two_users, organization_factory):
        result = calculate_productivity_outcomes(two_users, organization_factory())

        assert result.absenteeism.baseline_mean == 15.0
        assert result.absenteeism.current_mean == 7.5
        assert result.absenteeism.reduction == 7.5
        assert result.absenteeism.reduction_percent == 50.0

    def test_presenteeism_reduction_is_percentage_points(self, two_users, organization_factory):
        result = calculate_productivity_outcomes(two_users, organization_factory())

        assert result.presenteeism.baseline_mean == 35.0
        assert result.presenteeism.current_mean == 25.0
        assert result.presenteeism.reduction == 10.0
        assert result.presenteeism.reduction_percent == 28.6

    def test_zero_baseline_has_no_reduction_percent(self, user_factory, organization_factory):
        users = [user_factory(absenteeism=(0, 0), presenteeism=(20, 10))]

        result = calculate_productivity_outcomes(users, organization_factory())

        assert result.absenteeism.reduction == 0.0
        assert result.absenteeism.reduction_percent is None


class TestHoursRegained:
    """Tests for the 160-hour month hours-regained model."""

    def test_presenteeism_hours(self):
        assert presenteeism_hours(35) == pytest.approx(56.0)
        assert presenteeism_hours(0) == 0

    def test_hours_regained(self, two_users, organization_factory):
        result = calculate_productivity_outcomes(two_users, organization_factory())

        # 7.5 absenteeism hours + (56 - 40) presenteeism hours
        assert result.hours_regained.per_employee == 23.5
        assert result.hours_regained.total == 47
        assert result.hours_regained.annualized == 188


class TestCostSavings:
    """Tests for the cost savings projection."""

    def test_savings_from_cohort(self, two_users, organization_factory):
        result = calculate_productivity_outcomes(
            two_users, organization_factory(avg_hourly_cost=80)
        )

        assert result.cost_savings.mid == 3760
        assert result.cost_savings.low == 2632
        assert result.cost_savings.high == 4888
        assert result.cost_savings.annualized == 15040

    def test_thousand_quarterly_hours(self):
        savings = project_cost_savings(1000, 75)

        assert savings.mid == 75000
        assert savings.low == 52500
        assert savings.high == 97500
        assert savings.annualized == 300000

    @pytest.mark.parametrize("hours", [1, 47, 333.3, 12500])
    def test_bounds_are_ordered(self, hours):
        savings = project_cost_savings(hours, 65)

        assert savings.low <= savings.mid <= savings.high


class TestWorseningCohort:
    """Negative halves round toward positive infinity."""

    def test_half_hour_lost(self, user_factory, organization_factory):
        users = [user_factory(absenteeism=(10, 10.5), presenteeism=(30, 30))]

        result = calculate_productivity_outcomes(users, organization_factory(avg_hourly_cost=75))

        assert result.hours_regained.per_employee == -0.5
        assert result.hours_regained.total == 0
        assert result.hours_regained.annualized == -2
        assert result.cost_savings.mid == -37
        assert result.cost_savings.annualized == -150


class TestEmptyCohort:

    def test_empty_cohort_regains_nothing(self, organization_factory):
        result = calculate_productivity_outcomes([], organization_factory())

        assert result.hours_regained.total == 0
        assert result.cost_savings.annualized == 0
        assert result.absenteeism.reduction_percent is None
        assert result.presenteeism.reduction_percent is None
