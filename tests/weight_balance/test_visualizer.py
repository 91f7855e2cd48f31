"""Tests for the envelope chart."""

from massbalance.weight_balance import Airplane
from massbalance.weight_balance.visualizer import WeightBalanceVisualization, weight_and_balance


class TestWeightAndBalanceChart:
    """Test weight_and_balance."""

    def test_renders_svg(self, phdha) -> None:
        """Test an SVG document is produced."""
        svg = weight_and_balance(phdha(), WeightBalanceVisualization((640, 480)))

        assert svg.lstrip().startswith("<?xml")
        assert "<svg" in svg

    def test_fixed_axis(self, phdha) -> None:
        """Test explicit axis ranges are accepted."""
        visualization = WeightBalanceVisualization((800, 600), ((200.0, 420.0), (500.0, 800.0)))

        assert "<svg" in weight_and_balance(phdha(95.0), visualization)

    def test_without_fuel(self, two_moments, simple_limits) -> None:
        """Test airplanes without fuel only get a takeoff point."""
        svg = weight_and_balance(Airplane("X", two_moments, simple_limits()), WeightBalanceVisualization())

        assert "<svg" in svg
