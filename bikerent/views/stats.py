"""
Statistics Views
----------------
"""

from aiohttp_apispec import docs

from bikerent.serializer import JSendSchema, JSendStatus
from bikerent.serializer.decorators import returns
from bikerent.serializer.models import StatisticsSchema
from bikerent.service.stats import dashboard_stats
from bikerent.views.base import BaseView
from bikerent.views.decorators import requires_admin


class StatisticsView(BaseView):
    """The numbers for the fleet management dashboard."""

    url = "/stats"
    name = "stats"

    @docs(summary="Get Dashboard Statistics")
    @requires_admin
    @returns(JSendSchema.of(stats=StatisticsSchema()))
    async def get(self):
        return {
            "status": JSendStatus.SUCCESS,
            "data": {"stats": dashboard_stats(self.state)}
        }
