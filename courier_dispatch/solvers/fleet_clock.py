"""
Fleet Clock - vehicle availability over simulated time
"""
from typing import Dict, Iterable, List, Optional

from ..models import Vehicle
from ..errors import EmptyFleetError


class FleetClock:
    """
    Tracks when each vehicle is next free.

    Works on private copies of the supplied vehicles; the caller's objects
    are never touched. Ordering everywhere is (available_time, id).
    """

    def __init__(self, vehicles: Iterable[Vehicle]):
        self._vehicles: Dict[int, Vehicle] = {v.id: v.copy() for v in vehicles}

    @staticmethod
    def _order_key(vehicle: Vehicle):
        return (vehicle.available_time, vehicle.id)

    def ready_vehicles(self, current_time: float) -> List[Vehicle]:
        """Vehicles free at `current_time`, earliest-available first, then lowest id"""
        ready = [v for v in self._vehicles.values() if v.available_time <= current_time]
        return sorted(ready, key=self._order_key)

    def busy_vehicles(self, current_time: float) -> List[Vehicle]:
        busy = [v for v in self._vehicles.values() if v.available_time > current_time]
        return sorted(busy, key=self._order_key)

    def advance_to_next_available(self, current_time: Optional[float] = None) -> float:
        """
        Earliest time at which a vehicle becomes free.

        With `current_time` given, only vehicles still out after that time are
        considered, so the returned time is strictly later than `current_time`.
        """
        if not self._vehicles:
            raise EmptyFleetError()

        candidates = self._vehicles.values() if current_time is None else self.busy_vehicles(current_time)
        if not candidates:
            raise ValueError(f"No vehicle becomes available after {current_time}")

        return min(v.available_time for v in candidates)

    def commit(self, vehicle_id: int, departure_time: float, one_way_time: float) -> float:
        """Mark a vehicle out on a round trip; returns its new available time"""
        vehicle = self._vehicles[vehicle_id]
        vehicle.available_time = departure_time + 2 * one_way_time
        return vehicle.available_time

    def snapshot(self) -> List[Vehicle]:
        """Copies of the current vehicle states, ordered by id"""
        return [self._vehicles[vehicle_id].copy() for vehicle_id in sorted(self._vehicles)]

    def __len__(self):
        return len(self._vehicles)
