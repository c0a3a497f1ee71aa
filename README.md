# cfdot

Building blocks for a command-line tool that talks to a Diego deployment.
The package checks command-line flags, works out TLS settings from flags and
the environment, and checks and sends desired-LRP updates given as JSON.

It has no runtime dependencies beyond the standard library.

## Errors and exit codes

Failures are raised as exceptions from `cfdot.validators`.

- `CFDotError(message, code=None)` carries the exit code a command should end
  with, returned by `exit_code()`. Without an explicit code it is 4.
- `CFDotValidationError` is a `CFDotError` for a problem with what the user
  passed in. Its default exit code is 3.

`validate_conflicting_short_and_long_flag(short, long, argv=None)` raises
`CFDotValidationError` with the message
`Only one of <short> and <long> should be passed` when both forms appear in
`argv`. When `argv` is not given, `sys.argv` is checked.

```python
from cfdot.validators import CFDotError, validate_conflicting_short_and_long_flag

try:
    validate_conflicting_short_and_long_flag("-d", "--domain", ["-d", "x", "--domain", "x"])
except CFDotError as err:
    print(err, err.exit_code())  # Only one of -d and --domain should be passed 3
```

## TLS settings

`cfdot.tls_flags` holds the TLS settings as a frozen dataclass, `TLSConfig`,
with the fields `skip_cert_verify`, `ca_cert_file`, `cert_file` and
`key_file`.

`add_tls_flags(parser)` adds these options to an `argparse` parser and returns
the parser:

| Option             | Destination        | Environment variable |
|--------------------|--------------------|----------------------|
| `--skipCertVerify` | `skip_cert_verify` | `SKIP_CERT_VERIFY`   |
| `--caCertFile`     | `ca_cert_file`     | `CA_CERT_FILE`       |
| `--clientCertFile` | `cert_file`        | `CLIENT_CERT_FILE`   |
| `--clientKeyFile`  | `key_file`         | `CLIENT_KEY_FILE`    |

`--skipCertVerify` may be given alone (meaning true) or with a value; when it
is not given, its destination is `None`.

`parse_bool(value)` accepts `1, t, T, TRUE, true, True` as true and
`0, f, F, FALSE, false, False` as false, and raises `ValueError` for anything
else.

`resolve_tls_config(config, skip_cert_verify_given, environ=None)` returns a
new `TLSConfig`:

1. If `skip_cert_verify_given` is false and `SKIP_CERT_VERIFY` is set and not
   empty, it is read with `parse_bool`; an invalid value raises
   `CFDotValidationError`.
2. Each empty file path is taken from its environment variable. A path that
   is already set is kept.
3. Unless certificate verification is skipped, a CA certificate file is
   required and must be readable.
4. A client certificate and key are always required, and both must be
   readable.

Every failure is raised as `CFDotValidationError`, for example
`key file 'client.key' doesn't exist or is not readable: ...`. When `environ`
is not given, `os.environ` is used.

```python
import argparse

from cfdot.tls_flags import TLSConfig, add_tls_flags, resolve_tls_config

parser = add_tls_flags(argparse.ArgumentParser())
ns = parser.parse_args(["--skipCertVerify", "--clientCertFile", "client.crt",
                        "--clientKeyFile", "client.key"])
config = resolve_tls_config(
    TLSConfig(
        skip_cert_verify=bool(ns.skip_cert_verify),
        ca_cert_file=ns.ca_cert_file,
        cert_file=ns.cert_file,
        key_file=ns.key_file,
    ),
    skip_cert_verify_given=ns.skip_cert_verify is not None,
)
```

## Updating a desired LRP

`cfdot.update_desired_lrp` provides these functions:

- `validate_update_desired_lrp_arguments(args)` takes exactly two arguments:
  a process guid and a spec. The spec is either JSON text or `@` followed by
  the path of a file that holds it. The function returns the guid and the raw
  spec as bytes. It raises `CFDotValidationError` in these cases:
  - the number of arguments is wrong (`Missing arguments`);
  - the file cannot be read;
  - the spec is not valid JSON for an update (`Invalid JSON: ...`).
- `parse_desired_lrp_update(spec)` decodes a spec to a `dict`, or to `None`
  for JSON `null`. It raises `ValueError` when the spec is not JSON or is not
  an object.
- `generate_trace_id()` returns a random 128-bit id as 32 hex characters.
- `update_desired_lrp(client, process_guid, spec)` decodes the spec and calls
  `client.update_desired_lrp(trace_id, process_guid, update)` with a fresh
  trace id. A bad spec raises `ValueError`. Exceptions raised by the client
  are passed on unchanged.

Any object with that `update_desired_lrp` method can serve as the client:

```python
from cfdot.update_desired_lrp import (
    update_desired_lrp,
    validate_update_desired_lrp_arguments,
)


class PrintingClient:
    def update_desired_lrp(self, trace_id, process_guid, update):
        print(trace_id, process_guid, update)


guid, spec = validate_update_desired_lrp_arguments(["some-process-guid", '{"instances": 4}'])
update_desired_lrp(PrintingClient(), guid, spec)
```

## What this package does not do

- It installs no command to run.
- It has no client for the BBS, the Locket service or cell reps.
- It makes no network connections and opens no TLS connections. It only
  works out and checks the file paths such a connection would use.

The caller supplies the client and wires the pieces into its own
command-line interface.