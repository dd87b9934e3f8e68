# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""End-to-end usage of argguard from a small service class."""
from __future__ import annotations

import pytest

from argguard import (
    IncorrectArgumentType,
    accepts,
    mapping_with,
    sequence_of,
    validate,
    with_capabilities,
)
from argguard.inspection import assert_declares_input_types


class Page:
    def render(self):
        return "<page>"


class Publisher:
    def __init__(self, title, subtitle=None):
        validate({"title": str, "subtitle": [str, None]}, {"title": title, "subtitle": subtitle})
        self.title = title

    @accepts({"name": str})
    def rename(self, name):
        self.title = name
        return self

    @classmethod
    @accepts({"tags": sequence_of(str, None)})
    def from_tags(cls, tags):
        return cls(" ".join(t for t in tags if t))

    @staticmethod
    @accepts({"settings": mapping_with("host", "port")})
    def connect(settings):
        return f"{settings['host']}:{settings['port']}"

    @accepts({"thing": with_capabilities("render")})
    def publish(self, thing):
        return f"{self.title}: {thing.render()}"


def test_correct_arguments_pass():
    publisher = Publisher("News")

    assert publisher.rename("Daily").title == "Daily"
    assert Publisher.from_tags(["a", None, "b"]).title == "a b"
    assert Publisher.connect({"host": "localhost", "port": 80, "tls": False}) == "localhost:80"
    assert publisher.publish(Page()) == "Daily: <page>"
    assert Publisher("News").publish(Page()) == "News: <page>"


@pytest.mark.parametrize(
    "call",
    [
        lambda: Publisher(1),
        lambda: Publisher("News", subtitle=3),
        lambda: Publisher("News").rename(None),
        lambda: Publisher.from_tags(["a", "b"]),
        lambda: Publisher.connect({"host": "localhost"}),
        lambda: Publisher("News").publish(object()),
    ],
)
def test_incorrect_arguments_raise(call):
    with pytest.raises(IncorrectArgumentType):
        call()


def test_warn_mode_keeps_running(warn_logger):
    publisher = Publisher(1)

    assert publisher.title == 1
    assert Publisher.connect({"host": "h", "port": 1}) == "h:1"
    assert warn_logger.warning.call_count == 1


def test_publisher_declares_every_method():
    assert_declares_input_types(Publisher)
