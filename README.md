# macalerter

Send macOS desktop notifications from Python. `macalerter` builds the
command line for an `alerter` notification executable, runs it, and hands back
what the user did with the notification: clicked it, closed it, picked an
action, typed a reply, or let it time out.

## Installation

```
pip install macalerter
```

The notifications themselves are shown by an `alerter` executable, so this
package is useful on macOS only.

## What the package does not include

The package does not build or ship the `alerter` executable. Either tell each
call where it is (`Alerter.binary_path(...)`, or the `binary` argument of
`Alerter.remove` / `Alerter.list`), or place the executable at
`macalerter/bin/alerter` inside the installed package, which is where the
default lookup reads it from (see "Caching the executable"). Without either,
sending raises `BinaryExtractionError`.

## Sending a notification

`Alerter` is a fluent builder. Each setter returns the builder, so calls chain:

```python
from macalerter.alerter import Alerter

response = (
    Alerter("Choose an option")
    .title("Actions")
    .actions(["Yes", "No"])
    .close_label("Maybe")
    .binary_path("/usr/local/bin/alerter")
    .send()
)
print(response.activation_type, response.activation_value)
```

`send()` blocks until the notification is dismissed and returns an
`AlerterResponse` (a frozen dataclass) with two fields:

- `activation_type` – for example `@CONTENTCLICKED`, `@CLOSED`, `@TIMEOUT`
  or the label of the action that was chosen;
- `activation_value` – extra data such as reply text, or `None`.

With `.json(True)` the tool reports its result as JSON
(`{"activationType": ..., "activationValue": ...}`), which
`AlerterResponse.from_json` parses into the same response type. Without it,
`AlerterResponse.from_plain_text` turns the trimmed plain-text output into
`activation_type`, and `activation_value` is `None`.

### Builder options

| Method | Command-line flag |
| --- | --- |
| `title(title)` | `--title` |
| `subtitle(subtitle)` | `--subtitle` |
| `sound(sound)` | `--sound` |
| `actions(actions)` | `--actions` (any iterable, joined with commas) |
| `dropdown_label(label)` | `--dropdown-label` |
| `reply(placeholder)` | `--reply` |
| `close_label(label)` | `--close-label` |
| `group(group)` | `--group` |
| `sender(sender)` | `--sender` |
| `app_icon(path)` | `--app-icon` |
| `content_image(path)` | `--content-image` |
| `timeout(seconds)` | `--timeout` |
| `json(enabled)` | `--json` when enabled |
| `delay(seconds)` | `--delay` |
| `at(time)` | `--at` |
| `ignore_dnd(enabled)` | `--ignore-dnd` when enabled |
| `binary_path(path)` | none: chooses the executable to run |

`timeout` and `delay` take an integer from 0 to 2**32 − 1; anything else
raises `TypeError` (not an integer, or a bool) or `ValueError` (out of range).

`build_args()` returns the argument list without running anything; it always
starts with `--message` and the message, followed by the flags above in the
order of the table.

## Not waiting for the user

`send_async()` starts the tool and returns a `NotificationHandle` straight
away:

```python
from macalerter.alerter import Alerter

with Alerter("Still working...").timeout(30).binary_path("/usr/local/bin/alerter").send_async() as handle:
    response = handle.wait()
```

- `wait()` blocks and returns the `AlerterResponse`.
- `try_wait()` returns `None` while the notification is still up, and the
  response once it has finished.
- `detach()` lets the notification live on without the handle.
- `close()` (and leaving the `with` block, or the handle being garbage
  collected) kills a notification that is still owned by the handle.

Once a handle has produced its response or been detached, calling `wait()` or
`try_wait()` again raises `AlerterRuntimeError("handle already consumed")`.

## Managing grouped notifications

```python
from macalerter.alerter import Alerter

Alerter.remove("updates", "/usr/local/bin/alerter")
print(Alerter.list("ALL", "/usr/local/bin/alerter"))
```

`list` returns the tool's trimmed output as a string.

## Caching the executable

`macalerter.binary.extract_binary(data=None, cache_dir=None)` writes the bytes
of an `alerter` executable into a cache directory under the name
`alerter-<first 16 hex digits of their SHA-256>`, marks it executable, and
returns its path. `data` defaults to the contents of `macalerter/bin/alerter`
and `cache_dir` to the user cache directory for `macalerter` as reported by
`platformdirs`. Later calls with the same bytes reuse the existing file instead
of writing it again. The file is written under a temporary name and then
renamed into place. Failures raise `OSError`. `get_binary_path` takes the same
arguments and returns the same path.

## Errors

Everything raised by sending or managing notifications derives from
`macalerter.errors.AlerterError`, which keeps its message in `.detail`:

- `BinaryExtractionError` – the executable could not be put in place
  (`"failed to extract alerter binary: ..."`);
- `ProcessSpawnError` – the tool could not be started
  (`"failed to spawn alerter process: ..."`);
- `AlerterRuntimeError` – the tool exited with a failure (its stderr is the
  detail) or its output could not be parsed (`"alerter runtime error: ..."`).

## Showcase

A small command shows one notification of each kind, using the default
executable lookup:

```
macalerter-showcase basic
macalerter-showcase actions
macalerter-showcase remove
```

The available types are `basic`, `sound`, `actions`, `dropdown`, `reply`,
`icon`, `content-image`, `subtitle`, `group`, `sender`, `json`,
`close-label`, `ignore-dnd` and `remove` (which removes the
`showcase-group` notifications). The response is printed to standard output
and errors to standard error. Run it without an argument, or with an unknown
one, to see the list of types; it then exits with status 1.

## Running the tests

```
pip install "macalerter[test]"
pytest
```