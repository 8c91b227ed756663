from unittest.mock import AsyncMock

import pytest

from minimal_apis_extensions.ports.validation import BoundInput, IValidator
from minimal_apis_extensions.validation.composite import CompositeValidator
from minimal_apis_extensions.validation.result import ValidationResult


# Any value works, validators are mocked
class Body:
    pass


@pytest.mark.asyncio
async def test_composite_validator_success() -> None:
    v1 = AsyncMock(spec=IValidator)
    v1.validate.return_value = ValidationResult.success()

    v2 = AsyncMock(spec=IValidator)
    v2.validate.return_value = ValidationResult.success()

    composite = CompositeValidator([v1, v2])
    result = await composite.validate(Body())

    assert result.is_valid
    assert result.errors == {}
    v1.validate.assert_called()
    v2.validate.assert_called()


@pytest.mark.asyncio
async def test_composite_validator_merges_failures() -> None:
    v1 = AsyncMock(spec=IValidator)
    v1.validate.return_value = ValidationResult.failure({"field1": ["error1"]})

    v2 = AsyncMock(spec=IValidator)
    v2.validate.return_value = ValidationResult.failure({"field2": ["error2"]})

    v3 = AsyncMock(spec=IValidator)
    v3.validate.return_value = ValidationResult.failure({"field1": ["error3"]})

    composite = CompositeValidator()
    composite.add(v1)
    composite.add(v2)
    composite.add(v3)

    result = await composite.validate(Body())

    assert not result.is_valid
    assert result.errors == {"field1": ["error1", "error3"], "field2": ["error2"]}


@pytest.mark.asyncio
async def test_composite_validator_runs_every_validator() -> None:
    v1 = AsyncMock(spec=IValidator)
    v1.validate.return_value = ValidationResult.failure({"a": ["bad"]})
    v2 = AsyncMock(spec=IValidator)
    v2.validate.return_value = ValidationResult.success()

    body = Body()
    await CompositeValidator([v1, v2]).validate(body)

    v1.validate.assert_awaited_once_with(body, None)
    v2.validate.assert_awaited_once_with(body, None)


@pytest.mark.asyncio
async def test_composite_validator_forwards_bound_input() -> None:
    v1 = AsyncMock(spec=IValidator)
    v1.validate.return_value = ValidationResult.success()
    body = Body()
    bound_input = BoundInput(Body, {"raw": "1"})

    await CompositeValidator([v1]).validate(body, bound_input)

    v1.validate.assert_awaited_once_with(body, bound_input)


@pytest.mark.asyncio
async def test_composite_validator_add_appends_to_chain() -> None:
    v1 = AsyncMock(spec=IValidator)
    v1.validate.return_value = ValidationResult.failure({"a": ["first"]})
    v2 = AsyncMock(spec=IValidator)
    v2.validate.return_value = ValidationResult.failure({"a": ["second"]})

    composite = CompositeValidator([v1])
    composite.add(v2)
    result = await composite.validate(Body())

    assert result.errors == {"a": ["first", "second"]}
