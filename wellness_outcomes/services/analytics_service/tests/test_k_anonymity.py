"""Tests for minimum-cohort suppression."""
import pytest

from wellness_outcomes.services.analytics_service.k_anonymity import (
    KAnonymityEnforcer,
    K_ANONYMITY_THRESHOLD,
)


@pytest.fixture
def enforcer():
    """Create a KAnonymityEnforcer instance."""
    return KAnonymityEnforcer()


class TestKAnonymityThreshold:
    """Tests for k-anonymity threshold enforcement."""

    def test_group_below_threshold_suppressed(self, enforcer):
        """Groups with fewer than k members should be suppressed."""
        result = enforcer.check_and_suppress(
            data={"phq9_mean": 12.4},
            group_size=3,
            context="week_4",
        )

        assert result.suppressed is True
        assert result.data is None
        assert result.group_size == 3
        assert "below" in result.suppression_reason.lower()

    def test_group_at_threshold_passes(self, enforcer):
        """Groups with exactly k members should pass."""
        result = enforcer.check_and_suppress(
            data={"phq9_mean": 12.4},
            group_size=5,
            context="week_4",
        )

        assert result.suppressed is False
        assert result.data == {"phq9_mean": 12.4}
        assert result.suppression_reason is None

    def test_single_employee_suppressed(self, enforcer):
        result = enforcer.check_and_suppress(data={"phq9": 18}, group_size=1)

        assert result.suppressed is True
        assert result.data is None

    def test_zero_group_size_suppressed(self, enforcer):
        result = enforcer.check_and_suppress(data={"phq9": 18}, group_size=0)

        assert result.suppressed is True

    def test_default_threshold_is_five(self):
        assert K_ANONYMITY_THRESHOLD == 5

    @pytest.mark.parametrize("size,expected", [(0, False), (4, False), (5, True), (500, True)])
    def test_meets_threshold(self, enforcer, size, expected):
        assert enforcer.meets_threshold(size) is expected


class TestCustomThreshold:
    """Tests for custom k-anonymity thresholds."""

    def test_higher_threshold_more_restrictive(self):
        enforcer_5 = KAnonymityEnforcer(k_threshold=5)
        enforcer_10 = KAnonymityEnforcer(k_threshold=10)

        assert enforcer_5.check_and_suppress(data="x", group_size=7).suppressed is False
        assert enforcer_10.check_and_suppress(data="x", group_size=7).suppressed is True

    @pytest.mark.parametrize("k", [0, -3])
    def test_threshold_below_one_rejected(self, k):
        with pytest.raises(ValueError):
            KAnonymityEnforcer(k_threshold=k)
