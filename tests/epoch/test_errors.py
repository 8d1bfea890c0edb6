"""Unit tests for structured epoch errors."""

from epoch.errors import (
    EmptyPopulationError,
    EpochError,
    InvalidConfigError,
    InvalidTargetSizeError,
)


def test_errors_share_base_class():
    for error in (
        EmptyPopulationError(),
        InvalidConfigError(["breed_factor must be in (0, 1], got 0"]),
        InvalidTargetSizeError(1, 2),
    ):
        assert isinstance(error, EpochError)


def test_invalid_config_message_lists_errors():
    error = InvalidConfigError(["a is wrong", "b is wrong"])

    assert str(error) == "Invalid configuration: a is wrong; b is wrong"
    assert error.details == {"errors": ["a is wrong", "b is wrong"]}


def test_to_dict():
    error = InvalidTargetSizeError(target_size=0, survivors=3)

    assert error.to_dict() == {
        "error": {
            "code": "INVALID_TARGET_SIZE",
            "message": "Target size 0 is smaller than survivor count 3",
            "details": {"target_size": 0, "survivors": 3},
        }
    }


def test_empty_population_has_no_details():
    assert EmptyPopulationError().to_dict()["error"]["details"] == {}
