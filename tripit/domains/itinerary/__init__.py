"""TripIt itinerary API access."""

from tripit.domains.itinerary.client import TripItClient, build_authorization_url

__all__ = ["TripItClient", "build_authorization_url"]
