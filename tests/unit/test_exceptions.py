from __future__ import annotations

from minimal_apis_extensions.binding.validated import Validated
from minimal_apis_extensions.primitives.exceptions import (
    BinderContractError,
    BindingError,
    MinimalApisError,
    RequestBindingError,
)


def test_hierarchy() -> None:
    assert issubclass(BinderContractError, MinimalApisError)
    assert issubclass(BinderContractError, ValueError)
    assert issubclass(BindingError, MinimalApisError)
    assert issubclass(RequestBindingError, MinimalApisError)


def test_binding_error_defaults_to_bad_request() -> None:
    err = BindingError()

    assert err.status_code == 400
    assert "400" in str(err)


def test_request_binding_error_status() -> None:
    invalid = Validated(value=None, is_valid=False, errors={"name": ["bad"]})
    failed = Validated.create(
        None, initial_errors=["An error occurred."], default_binding_status_code=415
    )

    assert RequestBindingError(invalid).status_code == 400
    assert RequestBindingError(failed).status_code == 415
    assert RequestBindingError(failed).validated is failed
