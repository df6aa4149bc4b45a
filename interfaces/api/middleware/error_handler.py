"""Error handling decorators for API routes."""

import functools
from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING

import structlog
from fastapi import HTTPException, status
from returns.result import Failure, Success

from domain.exceptions import InfrastructureError
from interfaces.api.routes.helpers import _map_app_error_to_http_exception

if TYPE_CHECKING:
    from typing import Any

logger = structlog.get_logger()


def _unwrap_result(result: object, endpoint: str) -> "Any":  # noqa: ANN401
    if isinstance(result, Success):
        return result.unwrap()
    if isinstance(result, Failure):
        raise _map_app_error_to_http_exception(result.failure())

    logger.error("unexpected_result_type", endpoint=endpoint, result_type=type(result).__name__)
    raise HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="Unexpected result type",
    )


def handle_use_case_errors[T_co](
    func: Callable[..., Awaitable[T_co]],
) -> Callable[..., Awaitable[T_co]]:
    """Turn a route returning a use case ``Result`` into a plain FastAPI route.

    Success is unwrapped into the response body and Failure is mapped to an
    HTTP status by error category. An upstream outage that escaped the use
    case becomes 503; anything else is logged with its traceback and
    becomes 500.
    """

    @functools.wraps(func)
    async def wrapper(*args: "Any", **kwargs: "Any") -> T_co:  # noqa: ANN401
        try:
            result = await func(*args, **kwargs)
        except HTTPException:
            raise
        except InfrastructureError as exc:
            logger.warning(
                "upstream_unavailable",
                endpoint=func.__name__,
                error_type=type(exc).__name__,
                error=str(exc),
            )
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail="Service temporarily unavailable",
            ) from exc
        except Exception as exc:
            logger.exception("unexpected_error", endpoint=func.__name__, error=str(exc))
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Internal server error",
            ) from exc

        return _unwrap_result(result, func.__name__)

    return wrapper
