"""
Test suite for the async fallback boundary and outcome types.
"""
import asyncio
import sys
from unittest.mock import patch

from wanderpost import error_handling
from wanderpost.error_handling import (
    EmptyResultError,
    FallbackReason,
    GenerationError,
    Outcome,
    with_async_fallback,
)


def test_outcome_success_is_ok():
    outcome = Outcome.success("hello")
    assert outcome.ok
    assert outcome.reason is None and outcome.error is None
    print("✓ Outcome success test passed")


def test_outcome_fallback_carries_reason():
    error = RuntimeError("boom")
    outcome = Outcome.fallback("placeholder", FallbackReason.REQUEST_FAILED, error=error)
    assert not outcome.ok
    assert outcome.value == "placeholder"
    assert outcome.error is error
    print("✓ Outcome fallback test passed")


def test_boundary_passes_through_result():
    """A successful coroutine's outcome is returned untouched."""
    async def produce(value):
        return Outcome.success(value)

    outcome = asyncio.run(with_async_fallback(produce, "ok", fallback_value="fallback"))
    assert outcome == Outcome.success("ok")
    print("✓ Pass-through test passed")


def test_boundary_converts_exception_and_logs():
    """Any Exception becomes a logged request_failed fallback."""
    async def explode():
        raise OSError("network unreachable")

    with patch.object(error_handling.logger, "exception") as log_exception:
        outcome = asyncio.run(with_async_fallback(
            explode, fallback_value="fallback", error_message="Error generating image"))

    assert outcome.value == "fallback"
    assert outcome.reason is FallbackReason.REQUEST_FAILED
    assert isinstance(outcome.error, OSError)
    message = log_exception.call_args.args[0]
    assert message.startswith("Error generating image:"), f"Unexpected log message: {message}"
    print("✓ Exception conversion test passed")


def test_boundary_uses_reason_from_generation_errors():
    async def empty():
        raise EmptyResultError("No image generated")

    async def generic():
        raise GenerationError("bad response")

    assert asyncio.run(with_async_fallback(empty, fallback_value="x")).reason is FallbackReason.EMPTY_RESULT
    assert asyncio.run(with_async_fallback(generic, fallback_value="x")).reason is FallbackReason.REQUEST_FAILED
    print("✓ Error reason test passed")


def test_boundary_ignores_foreign_reason_attributes():
    """Exceptions with an unrelated `reason` attribute still map to request_failed."""
    class HTTPishError(Exception):
        reason = "Service Unavailable"

    async def fail():
        raise HTTPishError("503")

    outcome = asyncio.run(with_async_fallback(fail, fallback_value="x"))
    assert outcome.reason is FallbackReason.REQUEST_FAILED
    print("✓ Foreign reason test passed")


def run_all_tests():
    """Run all tests and report results."""
    print("Running Error Handling Tests\n" + "=" * 50 + "\n")

    tests = [obj for name, obj in sorted(globals().items())
             if name.startswith("test_") and callable(obj)]
    failed = 0
    for test in tests:
        try:
            test()
        except Exception as e:
            print(f"✗ {test.__name__} FAILED: {e}")
            failed += 1

    print("\n" + "=" * 50)
    print(f"Results: {len(tests) - failed} passed, {failed} failed")
    sys.exit(1 if failed else 0)


if __name__ == "__main__":
    run_all_tests()
