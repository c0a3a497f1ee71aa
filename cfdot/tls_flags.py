"""TLS flags and their resolution against the environment."""

from __future__ import annotations

import argparse
import os
from collections.abc import Mapping
from dataclasses import dataclass, replace

from cfdot.validators import CFDotValidationError

_TRUE_VALUES = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_VALUES = frozenset({"0", "f", "F", "FALSE", "false", "False"})

MISSING_CA_CERT_FILE = (
    "--caCertFile must be specified if using HTTPS and --skipCertVerify is not set"
)
MISSING_CLIENT_CERT_AND_KEY_FILES = (
    "--clientCertFile and --clientKeyFile must both be specified for TLS connections."
)


@dataclass(frozen=True)
class TLSConfig:
    """Paths and switches used to build TLS connections."""

    skip_cert_verify: bool = False
    ca_cert_file: str = ""
    cert_file: str = ""
    key_file: str = ""


def parse_bool(value: str) -> bool:
    """Parse a boolean the way the command line accepts them."""
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"invalid boolean value: {value!r}")


def add_tls_flags(parser: argparse.ArgumentParser) -> argparse.ArgumentParser:
    """Add the TLS flags to an argument parser."""
    parser.add_argument(
        "--skipCertVerify",
        dest="skip_cert_verify",
        nargs="?",
        const=True,
        default=None,
        type=parse_bool,
        help="when set to true, skips all SSL/TLS certificate verification "
        "[environment variable equivalent: SKIP_CERT_VERIFY]",
    )
    parser.add_argument(
        "--caCertFile",
        dest="ca_cert_file",
        default="",
        help="path the Certificate Authority (CA) file to use when verifying TLS "
        "keypairs [environment variable equivalent: CA_CERT_FILE]",
    )
    parser.add_argument(
        "--clientCertFile",
        dest="cert_file",
        default="",
        help="path to the TLS client certificate to use during mutual-auth TLS "
        "[environment variable equivalent: CLIENT_CERT_FILE]",
    )
    parser.add_argument(
        "--clientKeyFile",
        dest="key_file",
        default="",
        help="path to the TLS client private key file to use during mutual-auth TLS "
        "[environment variable equivalent: CLIENT_KEY_FILE]",
    )
    return parser


def _validate_readable_file(path: str, label: str) -> None:
    try:
        with open(path, "rb"):
            pass
    except OSError as exc:
        raise CFDotValidationError(
            f"{label} file '{path}' doesn't exist or is not readable: {exc}"
        ) from exc


def resolve_tls_config(
    config: TLSConfig,
    skip_cert_verify_given: bool,
    environ: Mapping[str, str] | None = None,
) -> TLSConfig:
    """Fill unset values from the environment and check the files exist."""
    env = os.environ if environ is None else environ

    skip = config.skip_cert_verify
    env_skip = env.get("SKIP_CERT_VERIFY", "")
    if not skip_cert_verify_given and env_skip:
        try:
            skip = parse_bool(env_skip)
        except ValueError as exc:
            raise CFDotValidationError(
                f"The value '{env_skip}' is not a valid value for SKIP_CERT_VERIFY. "
                "Please specify one of the following valid boolean values: "
                "1, t, T, TRUE, true, True, 0, f, F, FALSE, false, False"
            ) from exc

    resolved = replace(
        config,
        skip_cert_verify=skip,
        ca_cert_file=config.ca_cert_file or env.get("CA_CERT_FILE", ""),
        cert_file=config.cert_file or env.get("CLIENT_CERT_FILE", ""),
        key_file=config.key_file or env.get("CLIENT_KEY_FILE", ""),
    )

    if not resolved.skip_cert_verify:
        if not resolved.ca_cert_file:
            raise CFDotValidationError(MISSING_CA_CERT_FILE)
        _validate_readable_file(resolved.ca_cert_file, "CA cert")

    if not resolved.key_file or not resolved.cert_file:
        raise CFDotValidationError(MISSING_CLIENT_CERT_AND_KEY_FILES)

    _validate_readable_file(resolved.key_file, "key")
    _validate_readable_file(resolved.cert_file, "cert")
    return resolved