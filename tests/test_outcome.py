from __future__ import annotations

import copy
import pickle
from dataclasses import dataclass

import pytest
from kungfu import Error, Ok

from fallible import Failure, InvalidOutcomeAccessError, Outcome, Success


@dataclass(frozen=True)
class Person:
    name: str
    age: int


@dataclass(frozen=True)
class ValidationError:
    field: str
    message: str


def test_success_creates_successful_outcome() -> None:
    outcome = Outcome.success(42)

    assert outcome.is_success
    assert not outcome.is_failure
    assert outcome.value == 42


def test_success_with_none_value() -> None:
    outcome = Success(None)

    assert outcome.is_success
    assert outcome.value is None


def test_success_with_complex_value() -> None:
    person = Person("John", 30)
    outcome = Success(person)

    assert outcome.value is person
    assert outcome.value.name == "John"


def test_failure_creates_failed_outcome() -> None:
    outcome = Outcome.failure("Something went wrong")

    assert outcome.is_failure
    assert not outcome.is_success
    assert outcome.error == "Something went wrong"


def test_failure_with_custom_error_type() -> None:
    error = ValidationError("Email", "Invalid format")
    outcome = Failure(error)

    assert outcome.error is error
    assert outcome.error.field == "Email"


def test_value_on_failure_raises_invalid_access() -> None:
    with pytest.raises(InvalidOutcomeAccessError, match="Outcome is not successful"):
        _ = Failure("Error").value


def test_error_on_success_raises_invalid_access() -> None:
    with pytest.raises(InvalidOutcomeAccessError, match="Outcome is successful"):
        _ = Success(42).error


@pytest.mark.parametrize("value", [42, 0, -1])
def test_is_success_for_any_value(value: int) -> None:
    assert Success(value).is_success


def test_variants_are_mutually_exclusive() -> None:
    success = Success(42)
    failure = Failure("Error")

    assert (success.is_success, success.is_failure) == (True, False)
    assert (failure.is_success, failure.is_failure) == (False, True)


def test_outcomes_are_immutable() -> None:
    outcome = Success(1)

    with pytest.raises(AttributeError):
        outcome._value = 2  # type: ignore[misc]
    with pytest.raises(AttributeError):
        outcome.anything = 2  # type: ignore[attr-defined]
    with pytest.raises(AttributeError):
        del outcome._value

    assert outcome.value == 1


def test_base_outcome_cannot_be_instantiated() -> None:
    with pytest.raises(TypeError, match="use Success or Failure"):
        Outcome()

    assert isinstance(Success(1), Outcome)
    assert isinstance(Failure("x"), Outcome)


@pytest.mark.parametrize(
    "outcome",
    [Success(Person("Ann", 40)), Failure(ValidationError("Email", "Invalid format"))],
)
def test_copy_and_deepcopy_preserve_variant_and_payload(
    outcome: Outcome[Person, ValidationError],
) -> None:
    assert copy.copy(outcome) == outcome
    assert copy.deepcopy(outcome) == outcome


def test_deepcopy_copies_payload_inside_containers() -> None:
    items = [1, 2]
    original = {"ok": Success(items), "err": Failure("x")}

    cloned = copy.deepcopy(original)

    assert cloned == original
    assert cloned["ok"].value is not items


@pytest.mark.parametrize("outcome", [Success(Person("Ann", 40)), Failure("boom"), Success(None)])
def test_pickle_round_trip(outcome: Outcome[object, str]) -> None:
    restored = pickle.loads(pickle.dumps(outcome))

    assert restored == outcome
    assert type(restored) is type(outcome)


def test_equality_is_by_variant_and_payload() -> None:
    assert Success(1) == Success(1)
    assert Failure("x") == Failure("x")
    assert Success(1) != Success(2)
    assert Success("x") != Failure("x")
    assert hash(Success(1)) == hash(Success(1))
    assert hash(Success("x")) != hash(Failure("x"))


def test_repr() -> None:
    assert repr(Success(42)) == "Success(42)"
    assert repr(Failure("boom")) == "Failure('boom')"


def test_pattern_matching_on_variants() -> None:
    def describe(outcome: Outcome[int, str]) -> str:
        match outcome:
            case Success(value):
                return f"ok {value}"
            case Failure(error):
                return f"err {error}"
            case _:
                return "unreachable"

    assert describe(Success(1)) == "ok 1"
    assert describe(Failure("bad")) == "err bad"


def test_round_trip_through_kungfu_result() -> None:
    assert Outcome.from_result(Ok(3)) == Success(3)
    assert Outcome.from_result(Error("e")) == Failure("e")

    match Success(3).to_result():
        case Ok(value):
            assert value == 3
        case _:
            pytest.fail("expected Ok")

    match Failure("e").to_result():
        case Error(err):
            assert err == "e"
        case _:
            pytest.fail("expected Error")


def test_from_result_rejects_non_results() -> None:
    with pytest.raises(TypeError):
        Outcome.from_result(42)  # type: ignore[arg-type]


@pytest.mark.asyncio
async def test_awaiting_an_outcome_returns_the_same_instance() -> None:
    outcome = Failure("x")

    assert await outcome is outcome
