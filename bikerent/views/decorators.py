"""
Decorators
-------------------------
"""

from functools import wraps
from http import HTTPStatus
from typing import Any, Dict

from aiohttp import web
from aiohttp.web_request import Request
from aiohttp.web_urldispatcher import View

from bikerent.serializer import JSendSchema, failure


def resolve_match_map(request: Request, match_map) -> Dict[str, Any]:
    resolved_matches = {}
    for key, value in match_map.items():
        if isinstance(value, str):
            resolved_matches[key] = request.match_info.get(value)
        elif isinstance(value, tuple):
            name, converter = value
            try:
                resolved_matches[key] = converter(request.match_info.get(name))
            except (TypeError, ValueError):
                raise ValueError(f'Could not convert url parameter "{name}" to {converter.__name__}.')
        else:
            raise TypeError(f"match_getter only supports Union[str, Tuple[str, type]] not {type(value)}")
    return resolved_matches


def match_getter(getter_function, injection_parameter: str, **match_map):
    """
    Automatically fetches and includes an item from the current state, or 404's if it doesn't exist.
    The getter function is called with the state, followed by the url parameters.

    .. code-block:: python

        # example usage
        @match_getter(get_bike, 'bike', bike_id='id')
        async def get(self, bike: Bike)
            return web.json_response(data=bike.serialize())

    :param getter_function: The function to fetch the item from.
    :param injection_parameter: The name of the parameter to pass the object as.
    :param match_map: Associates a kwarg on the ``getter_function`` to a url variable.
    :return: A decorator that wraps the response and passes in the object.
    """

    def attach_instance(original_function):

        @wraps(original_function)
        async def new_func(self: View, **kwargs):
            try:
                params = resolve_match_map(self.request, match_map)
            except (ValueError, TypeError) as error:
                response = failure("Errors with your request.", "ValidationError", errors=list(error.args))
                raise web.HTTPBadRequest(text=JSendSchema().dumps(response), content_type='application/json')

            item = getter_function(self.request.app["state_manager"].state, **params)

            if item is None:
                response = failure(
                    f"Could not find {injection_parameter} with the given params.", "NotFoundError", params=params
                )
                raise web.HTTPNotFound(text=JSendSchema().dumps(response), content_type='application/json')

            return await original_function(self, **kwargs, **{injection_parameter: item})

        return new_func

    return attach_instance


def requires_admin(original_function):
    """
    Only lets requests carrying a valid admin token through.
    The token itself is checked by the token middleware.
    """

    @wraps(original_function)
    async def new_func(self: View, **kwargs):
        if self.request.get("token") is None:
            response = failure("You must be an administrator to do this.", "Unauthorized")
            return web.json_response(JSendSchema().dump(response), status=HTTPStatus.UNAUTHORIZED)

        return await original_function(self, **kwargs)

    return new_func
