"""Ok — a typed 200 JSON result that declares its response metadata."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar

from pydantic import TypeAdapter
from starlette.responses import JSONResponse

from ..binding.media_types import JSON_CONTENT_TYPE
from ..metadata.types import ProducesResponseType

if TYPE_CHECKING:
    from collections.abc import Mapping

HTTP_200_OK = 200

_JSONABLE: TypeAdapter[Any] = TypeAdapter(Any)


class Ok(JSONResponse):
    """200 OK response whose body is a typed payload.

    ``Ok[Item]`` is a cached specialization that knows its payload type and
    can describe itself to OpenAPI tooling.

    Example:
        ```python
        @router.get("/items/{item_id}", responses=Ok[Item].responses())
        async def get_item(item_id: int) -> Ok[Item]:
            return Ok[Item](await repo.get(item_id))
        ```
    """

    payload_type: ClassVar[Any] = None
    _specializations: ClassVar[dict[Any, type[Ok]]] = {}

    def __init__(
        self, result: Any, *, headers: Mapping[str, str] | None = None
    ) -> None:
        self.result = result
        super().__init__(
            _JSONABLE.dump_python(result, mode="json"),
            status_code=HTTP_200_OK,
            headers=headers,
        )

    def __class_getitem__(cls, payload_type: Any) -> type[Ok]:
        if cls.payload_type is not None:
            raise TypeError(f"{cls.__name__} is already parameterized")
        specialized = Ok._specializations.get(payload_type)
        if specialized is None:
            type_name = getattr(payload_type, "__name__", repr(payload_type))
            specialized = type(
                f"{cls.__name__}[{type_name}]",
                (cls,),
                {"payload_type": payload_type, "__module__": cls.__module__},
            )
            Ok._specializations[payload_type] = specialized
        return specialized

    @classmethod
    def get_metadata(cls) -> list[ProducesResponseType]:
        """The single metadata fact for this result type."""
        if cls.payload_type is None:
            raise TypeError("Ok must be parameterized with a payload type, e.g. Ok[Item]")
        return [ProducesResponseType(cls.payload_type, HTTP_200_OK, JSON_CONTENT_TYPE)]

    @classmethod
    def responses(cls) -> dict[int | str, dict[str, Any]]:
        """``responses=`` mapping for FastAPI route decorators."""
        merged: dict[int | str, dict[str, Any]] = {}
        for fact in cls.get_metadata():
            merged.update(fact.to_openapi())
        return merged
