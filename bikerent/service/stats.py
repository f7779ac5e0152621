"""
Statistics
----------

The numbers shown on the fleet management dashboard, computed
from the current state.
"""

from typing import Dict

from bikerent.models import AppState, BikeStatus, RentalStatus


def dashboard_stats(state: AppState) -> Dict[str, Dict]:
    bikes = {"total": len(state.bikes)}
    for status in BikeStatus:
        bikes[status.value] = sum(1 for bike in state.bikes if bike.status is status)

    finished = [rental for rental in state.rentals if rental.status is RentalStatus.FINISHED]
    revenue = sum(rental.total_price or 0 for rental in finished)

    return {
        "bikes": bikes,
        "rentals": {
            "total": len(state.rentals),
            "active": sum(1 for rental in state.rentals if rental.is_active),
            "finished": len(finished),
            "revenue": round(revenue, 2),
        },
        "users": {
            "total": len(state.users),
        },
        "issues": {
            "total": len(state.issues),
            "open": sum(1 for issue in state.issues if issue.is_open),
        },
    }
