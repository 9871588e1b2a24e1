import pytest

from solint import errors
from solint.errors import ErrorCode, SolintError


@pytest.mark.parametrize("code", list(ErrorCode))
def test_error_codes_are_prefixed(code):
    assert code.value.startswith("SOLINT_")


def test_every_error_has_its_own_code():
    classes = [
        cls
        for cls in vars(errors).values()
        if isinstance(cls, type) and issubclass(cls, SolintError) and cls is not SolintError
    ]

    codes = [cls.code for cls in classes]
    assert len(codes) == len(set(codes))
    assert ErrorCode.GENERIC not in codes


def test_config_not_found_has_hint():
    error = errors.ConfigNotFoundError()

    assert error.code == ErrorCode.CONFIG_NOT_FOUND
    assert error.hint == "Run 'solint init' to create a configuration file."


def test_generic_error_code_can_be_overridden():
    error = SolintError("boom", code=ErrorCode.INVALID_CONFIG, hint="check it")

    assert str(error) == "boom"
    assert error.code == ErrorCode.INVALID_CONFIG
    assert error.hint == "check it"
    assert SolintError("other").code == ErrorCode.GENERIC


def test_too_many_iterations_message():
    error = errors.TooManyFixIterationsError("a.sol", 10)

    assert error.iterations == 10
    assert "a.sol" in error.message
