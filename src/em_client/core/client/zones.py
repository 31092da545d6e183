"""Zone endpoints."""

from abc import ABC, abstractmethod
from typing import List
from uuid import UUID

from em_client.models import Zone, ZoneJoinToken
from .base import BaseApiClient, path_segment


class ZonesApi(ABC):

    @abstractmethod
    def get_zone(self, zone_id: UUID) -> Zone:
        pass

    @abstractmethod
    def get_zone_join_token(self, zone_id: UUID) -> ZoneJoinToken:
        """Token a new node presents to join the zone."""

    @abstractmethod
    def get_zones(self) -> List[Zone]:
        pass


class ZonesClient(BaseApiClient, ZonesApi):

    def get_zone(self, zone_id: UUID) -> Zone:
        return self._request("GET", f"/zones/{path_segment(zone_id)}", Zone)

    def get_zone_join_token(self, zone_id: UUID) -> ZoneJoinToken:
        return self._request("GET", f"/zones/{path_segment(zone_id)}/token", ZoneJoinToken)

    def get_zones(self) -> List[Zone]:
        return self._request("GET", "/zones", List[Zone])
