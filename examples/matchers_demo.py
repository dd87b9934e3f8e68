#!/usr/bin/env python3
# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Demo: structured shapes with matchers and in-body validation.

Shows sequence_of, mapping_with and with_capabilities, both through the
@accepts decorator and through validate(..., locals()) at the top of a
function body. Runs in warn mode so every violation is printed.
"""

import logging

from argguard import (
    configure,
    mapping_with,
    sequence_of,
    validate,
    with_capabilities,
)

logging.basicConfig(level=logging.WARNING, format="%(levelname)s - %(message)s")


class Chart:
    def render(self):
        return "<chart>"


def build_report(title, sections, settings, widget):
    validate(
        {
            "title": str,
            "sections": sequence_of(str),
            "settings": mapping_with("format", "locale"),
            "widget": with_capabilities("render", "resize"),
        },
        locals(),
    )
    return f"{title}: {len(sections)} section(s), {widget.render()}"


if __name__ == "__main__":
    configure(mode="warn")

    print(build_report("Q3", ["intro", "numbers"], {"format": "pdf", "locale": "en"}, Chart()))

    # Chart has no .resize, so both calls log that; the second one also logs
    # the int in sections and the missing "locale" key.
    print(build_report("Q4", ["intro", 2], {"format": "pdf"}, Chart()))
