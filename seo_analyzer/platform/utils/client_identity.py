from starlette.requests import Request

from seo_analyzer.platform.utils.rate_limit import UNKNOWN_IDENTITY


def get_client_identity(request: Request, header_name: str = "x-forwarded-for") -> str:
    """
    Identity used for rate limiting: the first address in the forwarded-for
    header. Requests without one all fall into the shared "unknown" bucket.
    """
    forwarded = request.headers.get(header_name, "")
    first_hop = forwarded.split(",")[0].strip()
    return first_hop or UNKNOWN_IDENTITY
