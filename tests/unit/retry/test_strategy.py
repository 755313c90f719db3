from __future__ import annotations

from unittest.mock import Mock

import pytest

from vaultclient.backoff import BaseBackoffStrategy, ConstantBackoff
from vaultclient.retry import RetryStrategy

###################################
#     Tests for RetryStrategy     #
###################################


def test_retry_strategy_default_backoff() -> None:
    strategy = RetryStrategy()
    assert isinstance(strategy.backoff_strategy, ConstantBackoff)
    assert strategy.calculate_delay(0) == 1.0


@pytest.mark.parametrize("attempt", [0, 1, 2])
def test_retry_strategy_fixed_interval(attempt: int) -> None:
    strategy = RetryStrategy(ConstantBackoff.from_milliseconds(10))
    assert strategy.calculate_delay(attempt) == 0.01


def test_retry_strategy_custom_backoff() -> None:
    backoff = Mock(spec=BaseBackoffStrategy, calculate=Mock(return_value=2.5))

    assert RetryStrategy(backoff).calculate_delay(3) == 2.5
    backoff.calculate.assert_called_once_with(3)
