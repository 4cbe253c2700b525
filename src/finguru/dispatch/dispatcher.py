import logging
from typing import Any, Callable
from uuid import UUID

from finguru.schemas.requests import RequestShape
from finguru.schemas.responses import AcceptedRequest
from finguru.validation.validator import validate_request

logger = logging.getLogger(__name__)

Handler = Callable[..., Any]


def acknowledge(request: RequestShape, target_id: UUID | None = None) -> AcceptedRequest:
    return AcceptedRequest(
        shape=type(request).__name__,
        target_id=target_id,
        payload=request.to_payload(),
    )


class RequestDispatcher:
    def __init__(self, fallback: Handler = acknowledge):
        self.fallback = fallback
        self._handlers: dict[type[RequestShape], Handler] = {}

    def register(self, shape: type[RequestShape], handler: Handler) -> None:
        self._handlers[shape] = handler

    def handler_for(self, shape: type[RequestShape]) -> Handler:
        return self._handlers.get(shape, self.fallback)

    def submit(self, shape: type[RequestShape], data: Any, target_id: UUID | None = None) -> Any:
        request = validate_request(shape, data)
        handler = self.handler_for(shape)
        logger.debug(
            "handing %s to %s",
            shape.__name__,
            getattr(handler, "__name__", handler),
            extra={"shape": shape.__name__, "target_id": str(target_id) if target_id else None},
        )
        return handler(request, target_id=target_id)


dispatcher = RequestDispatcher()
