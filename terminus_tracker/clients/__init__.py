from terminus_tracker.clients.base import BaseClient
from terminus_tracker.clients.strava import StravaClient

__all__ = ['BaseClient', 'StravaClient']
