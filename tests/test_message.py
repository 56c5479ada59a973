from __future__ import annotations

import dataclasses

import pytest

from localerr.message import TemplatedMessage, phrase


def test_message_exposes_template_and_arguments() -> None:
    message = TemplatedMessage("User {0} not found in {1}", ["alice", "staging"])
    assert message.template == "User {0} not found in {1}"
    assert message.arguments == ("alice", "staging")


def test_arguments_are_frozen_as_tuple() -> None:
    source = ["alice"]
    message = TemplatedMessage("User {0}", source)
    source.append("bob")
    assert message.arguments == ("alice",)


def test_message_is_immutable() -> None:
    message = TemplatedMessage("Hello")
    with pytest.raises(dataclasses.FrozenInstanceError):
        message.template = "Goodbye"  # type: ignore[misc]


def test_str_is_raw_template() -> None:
    assert str(phrase("Order %1 failed", 42)) == "Order %1 failed"


def test_coerce_wraps_plain_strings_only() -> None:
    existing = phrase("Hi {0}", "there")
    assert TemplatedMessage.coerce(existing) is existing
    wrapped = TemplatedMessage.coerce("plain")
    assert wrapped == TemplatedMessage("plain", ())


def test_to_dict() -> None:
    assert phrase("A {0} {1}", 1, "b").to_dict() == {"template": "A {0} {1}", "arguments": [1, "b"]}
