"""Checking and sending updates to a desired LRP."""

from __future__ import annotations

import json
import secrets
from collections.abc import Sequence
from pathlib import Path
from typing import Any, Protocol

from cfdot.validators import CFDotValidationError


class UpdateClient(Protocol):
    def update_desired_lrp(
        self, trace_id: str, process_guid: str, update: dict[str, Any] | None
    ) -> None: ...


def generate_trace_id() -> str:
    """Return a random 128-bit trace id as 32 hex characters."""
    return secrets.token_hex(16)


def parse_desired_lrp_update(spec: bytes | str) -> dict[str, Any] | None:
    """Decode a JSON desired LRP update; JSON null gives None."""
    try:
        update = json.loads(spec)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ValueError(str(exc)) from exc
    if update is not None and not isinstance(update, dict):
        raise ValueError(
            f"cannot unmarshal {type(update).__name__} into a desired LRP update"
        )
    return update


def validate_update_desired_lrp_arguments(args: Sequence[str]) -> tuple[str, bytes]:
    """Check the process guid and spec arguments; return the guid and spec bytes.

    The spec is either JSON text or "@" followed by the path of a file holding it.
    """
    if len(args) != 2:
        raise CFDotValidationError("Missing arguments")
    process_guid, arg_value = args
    if arg_value.startswith("@"):
        path = arg_value[1:]
        try:
            spec = Path(path).read_bytes()
        except OSError as exc:
            reason = (exc.strerror or str(exc)).lower()
            raise CFDotValidationError(f"stat {path}: {reason}") from exc
    else:
        spec = arg_value.encode()
    try:
        parse_desired_lrp_update(spec)
    except ValueError as exc:
        raise CFDotValidationError(f"Invalid JSON: {exc}") from exc
    return process_guid, spec


def update_desired_lrp(client: UpdateClient, process_guid: str, spec: bytes | str) -> None:
    """Send the update in spec for process_guid through the client."""
    trace_id = generate_trace_id()
    update = parse_desired_lrp_update(spec)
    client.update_desired_lrp(trace_id, process_guid, update)