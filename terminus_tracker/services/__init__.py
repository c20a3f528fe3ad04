from terminus_tracker.services.live import LiveActivityService
from terminus_tracker.services.sync import SyncService

__all__ = ['LiveActivityService', 'SyncService']
