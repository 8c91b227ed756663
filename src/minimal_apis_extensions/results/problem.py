"""Problem details responses (RFC 9457)."""

from __future__ import annotations

from http import HTTPStatus
from typing import TYPE_CHECKING, Any

from starlette.responses import JSONResponse

if TYPE_CHECKING:
    from collections.abc import Mapping

PROBLEM_JSON_CONTENT_TYPE = "application/problem+json"
VALIDATION_PROBLEM_TITLE = "One or more validation errors occurred."


def _status_title(status_code: int) -> str:
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return "Error"


class Problem(JSONResponse):
    """``application/problem+json`` response."""

    media_type = PROBLEM_JSON_CONTENT_TYPE

    def __init__(
        self,
        status_code: int = 500,
        *,
        detail: str | None = None,
        title: str | None = None,
        type_: str = "about:blank",
        extensions: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> None:
        body: dict[str, Any] = {
            "type": type_,
            "title": title or _status_title(status_code),
            "status": status_code,
        }
        if detail is not None:
            body["detail"] = detail
        if extensions:
            body.update(extensions)
        self.problem = body
        super().__init__(body, status_code=status_code, headers=headers)


class ValidationProblem(Problem):
    """Problem details carrying field-level validation errors."""

    def __init__(
        self,
        errors: Mapping[str, list[str]],
        *,
        status_code: int = 400,
        title: str = VALIDATION_PROBLEM_TITLE,
        detail: str | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> None:
        self.errors = {key: list(messages) for key, messages in errors.items()}
        super().__init__(
            status_code,
            detail=detail,
            title=title,
            extensions={"errors": self.errors},
            headers=headers,
        )
