from __future__ import annotations

import logging

import pytest

from twitchbot.irc.dispatcher import SHUTDOWN_COMMAND, CommandDispatcher
from twitchbot.irc.models import ChatEvent, CommandInvocation, DispatchOutcome


def _event(user: str, payload: str = "!x") -> ChatEvent:
    return ChatEvent(user=user, msg_type="PRIVMSG", payload=payload)


@pytest.mark.asyncio
async def test_shutdown_from_channel_owner():
    disp = CommandDispatcher("mychan", "testbot")
    outcome = await disp.dispatch(_event("mychan"), CommandInvocation(SHUTDOWN_COMMAND))
    assert outcome is DispatchOutcome.SHUTDOWN


@pytest.mark.asyncio
@pytest.mark.parametrize("command", ["tbdown", "anything", "hello"])
async def test_non_owner_never_triggers_handlers(command):
    disp = CommandDispatcher("mychan")
    fired: list[str] = []

    async def handler(invocation, event):  # noqa: ARG001
        fired.append(invocation.command)
        return DispatchOutcome.HANDLED

    disp.register("anything", handler)
    disp.register("hello", handler)
    outcome = await disp.dispatch(_event("alice"), CommandInvocation(command))
    assert outcome is DispatchOutcome.IGNORED
    assert fired == []


@pytest.mark.asyncio
async def test_owner_check_is_case_sensitive():
    disp = CommandDispatcher("mychan")
    outcome = await disp.dispatch(_event("MyChan"), CommandInvocation(SHUTDOWN_COMMAND))
    assert outcome is DispatchOutcome.IGNORED


@pytest.mark.asyncio
async def test_unknown_command_is_ignored():
    disp = CommandDispatcher("mychan")
    outcome = await disp.dispatch(_event("mychan"), CommandInvocation("dance", "now"))
    assert outcome is DispatchOutcome.IGNORED


@pytest.mark.asyncio
async def test_registered_handler_receives_invocation_and_event():
    disp = CommandDispatcher("mychan")
    seen: list[tuple[CommandInvocation, ChatEvent]] = []

    def sync_handler(invocation, event):
        seen.append((invocation, event))
        return DispatchOutcome.HANDLED

    disp.register("echo", sync_handler)
    event = _event("mychan", "!echo hi")
    outcome = await disp.dispatch(event, CommandInvocation("echo", "hi"))
    assert outcome is DispatchOutcome.HANDLED
    assert seen == [(CommandInvocation("echo", "hi"), event)]
    assert disp.commands == ["echo", SHUTDOWN_COMMAND]


@pytest.mark.asyncio
async def test_handler_without_outcome_counts_as_handled():
    disp = CommandDispatcher("mychan")

    async def handler(invocation, event):  # noqa: ARG001
        return None

    disp.register("noop", handler)
    outcome = await disp.dispatch(_event("mychan"), CommandInvocation("noop"))
    assert outcome is DispatchOutcome.HANDLED


@pytest.mark.asyncio
async def test_handler_error_is_logged_not_raised(caplog):
    caplog.set_level(logging.ERROR, logger="twitchbot")
    disp = CommandDispatcher("mychan", "testbot")

    async def boom(invocation, event):  # noqa: ARG001
        raise RuntimeError("boom")

    disp.register("boom", boom)
    outcome = await disp.dispatch(_event("mychan"), CommandInvocation("boom"))
    assert outcome is DispatchOutcome.IGNORED
    assert any("Command !boom failed: boom" in r.message for r in caplog.records)


@pytest.mark.asyncio
async def test_unregister_shutdown_disables_it():
    disp = CommandDispatcher("mychan")
    disp.unregister(SHUTDOWN_COMMAND)
    outcome = await disp.dispatch(_event("mychan"), CommandInvocation(SHUTDOWN_COMMAND))
    assert outcome is DispatchOutcome.IGNORED
