from abc import ABC, abstractmethod

from cupost_tracker.fetcher import UpstreamFetcher
from cupost_tracker.models.tracking import CarrierTrackInput, TrackInfo


def carrier_specific_key(carrier_id: str, field: str) -> str:
    """Namespaced key for data with no place in the generic schema."""
    return f"{carrier_id}/raw/{field}"


class Carrier(ABC):
    """A shipment-tracking provider reachable through an upstream fetcher."""

    carrier_id: str

    def __init__(self, upstream_fetcher: UpstreamFetcher):
        self.upstream_fetcher = upstream_fetcher

    def __repr__(self):
        return f"{type(self).__name__}(carrier_id={self.carrier_id})"

    @abstractmethod
    def track(self, input: CarrierTrackInput) -> TrackInfo:
        """
        Track a single shipment.

        Raises:
            NotFoundError: if the carrier has no record for the number
        """
