from .analytics import AnalyticsHandlers
from .apps import AppHandlers
from .beta import BetaHandlers
from .bundles import BundleHandlers
from .people import DeviceHandlers, UserHandlers

__all__ = [
    "AnalyticsHandlers",
    "AppHandlers",
    "BetaHandlers",
    "BundleHandlers",
    "DeviceHandlers",
    "UserHandlers",
]
