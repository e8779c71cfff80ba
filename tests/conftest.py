"""Shared pytest fixtures."""

import pytest

from litcode_tutor.llm.schemas import ConversationTurn, ProblemSnapshot, Speaker


@pytest.fixture()
def problem() -> ProblemSnapshot:
    return ProblemSnapshot(
        title="Two Sum",
        description="Return indices of the two numbers that add up to target.",
        code="def two_sum(nums, target):\n    pass\n",
    )


@pytest.fixture()
def history() -> tuple[ConversationTurn, ...]:
    return (
        ConversationTurn(speaker=Speaker.USER, text="a"),
        ConversationTurn(speaker=Speaker.ASSISTANT, text="b"),
    )
