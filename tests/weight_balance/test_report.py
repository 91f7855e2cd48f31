"""Tests for the load table."""

from massbalance.weight_balance import Airplane, LeverArm, MassKind, VolumeUnit
from massbalance.weight_balance.report import render_table


class TestRenderTable:
    """Test render_table."""

    def test_lists_every_moment(self, phdha) -> None:
        """Test one row per load item."""
        table = render_table(phdha())

        assert table.splitlines()[0] == "PHDHA"
        for name in ("Empty mass", "Pilot", "Passenger", "Baggage", "Fuel"):
            assert name in table
        assert "62.00L avgas" in table

    def test_verdicts(self, phdha) -> None:
        """Test takeoff and landing verdicts."""
        assert "Takeoff CG" in render_table(phdha(80.0))
        assert "OUT OF LIMITS" not in render_table(phdha(80.0))
        assert "OUT OF LIMITS" in render_table(phdha(95.0))
        assert "Landing CG" in render_table(phdha(80.0))

    def test_no_landing_without_fuel(self, two_moments, simple_limits) -> None:
        """Test landing rows are omitted when there is no fuel."""
        table = render_table(Airplane("X", two_moments, simple_limits()))

        assert "Landing" not in table
        assert "WITHIN LIMITS" in table

    def test_solved_fuel_row(self, two_moments, simple_limits) -> None:
        """Test a solver result appears in the table."""
        plane = Airplane("X", two_moments, simple_limits(24.0))
        plane.add_max_fuel_within_limits("Tank", LeverArm(4.0), MassKind.AVGAS, VolumeUnit.LITER)

        assert "12.50L avgas" in render_table(plane)

    def test_empty_airplane(self, simple_limits) -> None:
        """Test an airplane without loads."""
        assert "no load" in render_table(Airplane("X", [], simple_limits()))
