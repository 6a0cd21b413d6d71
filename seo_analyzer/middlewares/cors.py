# seo_analyzer/middlewares/cors.py
from starlette.datastructures import Headers
from starlette.middleware.cors import CORSMiddleware
from starlette.responses import Response


class EmptyPreflightCORSMiddleware(CORSMiddleware):
    """
    Starlette's CORSMiddleware, except an accepted preflight is answered with
    an empty 200 instead of a plain-text "OK" body.
    """

    def preflight_response(self, request_headers: Headers) -> Response:
        response = super().preflight_response(request_headers)
        if response.status_code != 200:
            return response

        headers = {
            key: value
            for key, value in response.headers.items()
            if key not in ("content-length", "content-type")
        }
        return Response(status_code=200, headers=headers)
