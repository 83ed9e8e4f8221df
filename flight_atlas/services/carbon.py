"""Carbon footprint and offset cost estimates for flights."""

from __future__ import annotations

from typing import Iterable

from ..config import CARBON_CONFIG, CarbonConfig
from ..core import CarbonSummary, EmissionsEstimate, Route
from ..utils import geo


class CarbonEstimator:
    """Distance based CO2 estimate with a radiative forcing uplift.

    The per passenger-km factor depends on the distance band: short flights
    burn proportionally more fuel on take-off and landing. A hint about the
    aircraft family nudges the factor for notably efficient or inefficient
    types.
    """

    def __init__(self, config: CarbonConfig = CARBON_CONFIG):
        self.config = config

    def footprint(
        self,
        distance_miles: float | None,
        passengers: int = 1,
        aircraft_type: str | None = None,
    ) -> float:
        """Return the estimated kilograms of CO2, rounded to two decimals."""

        if not distance_miles or distance_miles <= 0:
            return 0.0

        distance_km = distance_miles * self.config.km_per_mile
        factor = self.emission_factor(distance_km, aircraft_type)
        carbon = distance_km * factor * self.config.radiative_forcing * passengers
        return round(carbon, 2)

    def emission_factor(self, distance_km: float, aircraft_type: str | None = None) -> float:
        factor = self.config.long_haul_factor
        for upper_km, band_factor in self.config.emission_bands:
            if distance_km < upper_km:
                factor = band_factor
                break

        if aircraft_type:
            hint = aircraft_type.upper()
            if any(family in hint for family in self.config.efficient_aircraft):
                factor *= self.config.efficient_multiplier
            elif any(family in hint for family in self.config.inefficient_aircraft):
                factor *= self.config.inefficient_multiplier
        return factor

    def offset_cost(self, carbon_kg: float) -> float:
        """Return the USD cost of offsetting ``carbon_kg``, never below the minimum."""

        tonnes = carbon_kg / 1000
        cost = round(tonnes * self.config.price_per_tonne, 2)
        return max(cost, self.config.minimum_offset_cost)

    def estimate(
        self,
        distance_miles: float | None,
        passengers: int = 1,
        aircraft_type: str | None = None,
    ) -> EmissionsEstimate:
        carbon = self.footprint(distance_miles, passengers, aircraft_type)
        return EmissionsEstimate(carbon_kg=carbon, offset_cost=self.offset_cost(carbon))

    def route_footprint(self, route: Route, passengers: int = 1) -> float:
        # distance recorded in the log wins over the computed one
        distance = route.distance_miles
        if distance is None:
            distance = geo.distance_miles(route.origin, route.destination)
        return self.footprint(distance, passengers, route.aircraft_type)

    def summarize(self, flights: Iterable[tuple[float, bool]]) -> CarbonSummary:
        """Summarise ``(carbon_kg, carbon_offset)`` pairs for the dashboard."""

        total = 0.0
        offset = 0.0
        for carbon_kg, is_offset in flights:
            total += carbon_kg or 0.0
            if is_offset:
                offset += carbon_kg or 0.0

        unoffset = total - offset
        percentage = geo.round_half_up(offset / total * 100) if total > 0 else 0
        return CarbonSummary(
            total_carbon_kg=round(total, 2),
            offset_carbon_kg=round(offset, 2),
            unoffset_carbon_kg=round(unoffset, 2),
            offset_percentage=percentage,
            estimated_offset_cost=self.offset_cost(unoffset),
        )


_DEFAULT = CarbonEstimator()


def carbon_footprint(distance_miles: float | None, passengers: int = 1, aircraft_type: str | None = None) -> float:
    return _DEFAULT.footprint(distance_miles, passengers, aircraft_type)


def offset_cost(carbon_kg: float) -> float:
    return _DEFAULT.offset_cost(carbon_kg)
