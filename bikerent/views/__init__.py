"""
.. autoclasstree:: bikerent.views

This package contains the server API for viewing bikes and
parking zones, and for starting and ending rentals.

API Conventions
---------------

The API conforms as best as possible to the REST standard. For a quick primer, look at `Web Api Design`_. In short,
the api must:

* Be ordered in terms of resources (nouns such as bike)
* Have multiple ways of accessing the same resource (GET, POST, PUT, PATCH, DELETE)
* Accept and return JSON with snake_case key naming
* Have idempotent_ GET, PUT, PATCH, and DELETE operations
* Support filtering (if necessary) using the query string

API Expected Responses
----------------------

The server responds with JSend formatted JSON to all requests, except for
the state sync routes which speak the plain state format of the mobile clients.

.. _`Web Api Design`: https://pages.apigee.com/rs/apigee/images/api-design-ebook-2012-03.pdf
.. _idempotent: https://www.w3.org/Protocols/rfc2616/rfc2616-sec9.html#sec9.1.2
"""

import aiohttp_cors
from aiohttp.abc import Application

from bikerent import logger
from .bikes import BikeView, BikesView, BikeRentalsView
from .misc import redoc
from .rentals import RentalView, RentalsView, RentalEndView
from .stats import StatisticsView
from .sync import StateView, UploadView
from .users import UserView, UserRentalsView, UserCurrentRentalView, UserNotificationsView
from .zones import ZoneView, ZonesView, NearestZoneView

views = [
    BikeView, BikesView, BikeRentalsView,
    RentalView, RentalsView, RentalEndView,
    UserView, UserRentalsView, UserCurrentRentalView, UserNotificationsView,
    NearestZoneView, ZoneView, ZonesView,
    StatisticsView,
]

sync_views = [StateView, UploadView]


def register_views(app: Application, base: str, sync_base: str):
    """
    Registers all the API views onto the given router at a specific root url.

    :param app: The app to register the views to.
    :param base: The base URL of the API.
    :param sync_base: The base URL of the state sync routes.
    """
    cors = aiohttp_cors.setup(app, defaults={
        "*": aiohttp_cors.ResourceOptions(
            allow_credentials=True,
            expose_headers="*",
            allow_headers="*",
            allow_methods="*",
        )
    })

    for root, group in ((base, views), (sync_base, sync_views)):
        for view in group:
            logger.info("Registered %s at %s", view.__name__, root + view.url)
            view.register_route(app, root)
            view.enable_cors(cors)
