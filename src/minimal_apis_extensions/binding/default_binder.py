"""JsonDefaultBinder — deserializes request bodies into target values."""

from __future__ import annotations

import inspect
import json
import logging
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError as PydanticValidationError

from ..config import BindingConfig
from ..ports.binding import BindingAttempt
from ..ports.validation import BoundInput
from ..primitives.exceptions import BindingError
from .media_types import is_json_media_type
from .target import BindingSource

if TYPE_CHECKING:
    from starlette.requests import Request

    from .target import BindingTarget

logger = logging.getLogger("minimal_apis.binding")

HTTP_400_BAD_REQUEST = 400
HTTP_415_UNSUPPORTED_MEDIA_TYPE = 415


class JsonDefaultBinder:
    """Default binder for JSON request bodies.

    Dispatches on the :class:`~minimal_apis_extensions.binding.target.BindingSource`
    resolved for the target: types implementing ``bind_async`` bind
    themselves, everything else is read from a JSON body.

    Models, dataclasses and typed dicts are first validated in full. When
    that fails the value is built without validation so the partially
    populated object can be reported on by the validator, which receives
    the matched input alongside it.
    """

    def __init__(self, config: BindingConfig | None = None) -> None:
        self._config = config or BindingConfig()

    @property
    def config(self) -> BindingConfig:
        return self._config

    async def get_value(
        self, request: Request, target: BindingTarget[Any]
    ) -> BindingAttempt[Any]:
        if target.source is BindingSource.CUSTOM:
            return await self._bind_custom(request, target)
        return await self._bind_json_body(request, target)

    async def _bind_custom(
        self, request: Request, target: BindingTarget[Any]
    ) -> BindingAttempt[Any]:
        try:
            value = target.target_type.bind_async(request, target)
            if inspect.isawaitable(value):
                value = await value
        except BindingError as exc:
            logger.debug(
                "Custom binding of %s failed: %s", target.display_name, exc
            )
            return BindingAttempt(None, exc.status_code)
        if value is None:
            return self._absent(target)
        return BindingAttempt(value)

    async def _bind_json_body(
        self, request: Request, target: BindingTarget[Any]
    ) -> BindingAttempt[Any]:
        declared = _declares_body(request)
        if not declared and "content-type" not in request.headers:
            return self._absent(target)

        content_type = request.headers.get("content-type")
        if not is_json_media_type(content_type, self._config.json_media_types):
            logger.debug(
                "Unsupported content type %r for %s",
                content_type,
                target.display_name,
            )
            return BindingAttempt(None, HTTP_415_UNSUPPORTED_MEDIA_TYPE)

        body = await request.body()
        if not body.strip():
            if not declared:
                return self._absent(target)
            logger.debug("Empty request body for %s", target.display_name)
            return BindingAttempt(None, HTTP_400_BAD_REQUEST)

        try:
            payload = json.loads(body)
        except ValueError:
            logger.debug("Malformed JSON body for %s", target.display_name)
            return BindingAttempt(None, HTTP_400_BAD_REQUEST)

        if payload is None:
            return self._absent(target)
        return self._convert(payload, target)

    def _absent(self, target: BindingTarget[Any]) -> BindingAttempt[Any]:
        if target.optional:
            return BindingAttempt(None)
        logger.debug("Missing value for required %s", target.display_name)
        return BindingAttempt(None, HTTP_400_BAD_REQUEST)

    def _convert(self, payload: Any, target: BindingTarget[Any]) -> BindingAttempt[Any]:
        if not target.shape.is_structured:
            try:
                return BindingAttempt(target.adapter.validate_python(payload))
            except PydanticValidationError:
                logger.debug(
                    "Body does not match %s", target.display_name, exc_info=True
                )
                return BindingAttempt(None, HTTP_400_BAD_REQUEST)

        if not isinstance(payload, dict):
            logger.debug(
                "Expected a JSON object for %s, got %s",
                target.display_name,
                type(payload).__name__,
            )
            return BindingAttempt(None, HTTP_400_BAD_REQUEST)

        data = self._match_fields(payload, target)
        bound_input = BoundInput(target.target_type, data)
        try:
            value = target.validate_input(data)
        except PydanticValidationError:
            value = target.construct_partial(data)
        return BindingAttempt(value, bound_input=bound_input)

    def _match_fields(
        self, payload: dict[str, Any], target: BindingTarget[Any]
    ) -> dict[str, Any]:
        data: dict[str, Any] = {}
        for key, value in payload.items():
            input_key = target.input_key(
                key, case_insensitive=self._config.case_insensitive
            )
            if input_key is not None and input_key not in data:
                data[input_key] = value
        return data


def _declares_body(request: Request) -> bool:
    """Whether the framing headers announce a body.

    HTTP/2 and HTTP/3 requests may stream a body with neither header, so a
    request that only carries a ``Content-Type`` is read to find out.
    """
    headers = request.headers
    if "transfer-encoding" in headers:
        return True
    length = headers.get("content-length")
    if length is None:
        return False
    return not (length.strip() == "0" and "content-type" not in headers)
