"""Silence decode-failure logging for one block of work."""

import logging

from string_builder import BuilderConfig, StringBuilder, builder_config_context

logging.basicConfig(level=logging.DEBUG)

# Logged at DEBUG
StringBuilder().try_append_bytes(b"\xff")

with builder_config_context(BuilderConfig(log_decode_failures=False)):
    # Not logged
    outcome = StringBuilder().try_append_bytes(b"\xff")
    print("failed quietly:", outcome.unwrap_err())
