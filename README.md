# ltbkit

A small collection of general-purpose helpers. It has no dependencies outside
the standard library.

## Modules

- `ltbkit.error`: `Error`, an exception that carries a `Severity` (`ERROR` or
  `WARNING`), a `SourceLocation` and a debug message of the form
  `"[file:line] message"`. `make_error` and `make_warning` build one located at
  the caller. `check_valid(value, name, message=None)` raises one when `value`
  is falsy. `log_error` logs an error at warning or error level, depending on
  its severity. `invoke_if_non_null` calls a callback unless the callback is
  `None`. `raise_error` raises a chosen exception type, `RuntimeError` by
  default. `ContextError` and `make_context_error` pair an error with extra
  data.
- `ltbkit.duration`: a `Duration` is an `int` of nanoseconds.
  `to_hours` … `to_nanos` convert one, or a `timedelta`, into a float count of
  that unit. `duration_hours` … `duration_nanos` build a duration from a
  number; fractional input is truncated toward zero.
- `ltbkit.timers`: `Timer` is a monotonic stopwatch with `start()` and
  `duration_since_start()`. `ScopedTimer(callback)` times a `with` block and
  passes the elapsed nanoseconds to `callback`.
- `ltbkit.enum_flags`: `Flags` is a bit set over an `Enum` whose values are
  the integers 0, 1, 2, …. It supports `~`, `|`, `&`, `^`, equality,
  truthiness and iteration in declaration order. The module also has
  `to_bits`, `make_flags`, `add_flag`, `remove_flag`, `toggle_flag`,
  `has_flag`, `no_flags`, `all_flags` and `to_list`.
- `ltbkit.container_utils`: `has_key`, `has_item` and `has_item_if` test
  membership. `remove_all_by_key`, `remove_all_by_value`,
  `remove_all_by_predicate` and `iterate_with_removals` remove elements in
  place. `find_first_available(preferred, available)` returns the first
  preferred value that is available. It raises `Error` when nothing is
  available, and when none of the preferred values are.
- `ltbkit.generic_guard`: `make_guard(init, destroy, *args)` calls `init` at
  once and returns a `GenericGuard`. The guard calls `destroy` when its `with`
  block ends. Each function gets `args` if it accepts them, and no arguments
  otherwise.
- `ltbkit.string_utils`: `to_lower_ascii` lower-cases only the letters A–Z.
- `ltbkit.hash_utils`: `hash_combine(seed, value)` mixes a value's hash into a
  64-bit seed. `string_seed_to_uint(text)` turns a string into a 32-bit seed
  with the seed-sequence algorithm.
- `ltbkit.file_utils`: `get_binary_file_contents` returns a file's bytes.
  `get_binary_files_contents` returns the bytes of several files. Both raise
  `Error` when a file cannot be opened.
- `ltbkit.logging_utils`: `try_setting_log_level(name)` sets the root
  logger's level. It accepts `trace`, `debug`, `info`, `warn`, `err`,
  `critical` or `off`; any other name raises `Error`, which lists the
  choices. `TRACE` is a level below `DEBUG`.
- `ltbkit.type_string`: `type_string(value)` gives the qualified name of a
  value's type, or of the type itself if `value` is a type. Built-in types
  are named without their module.
- `ltbkit.json_settings`: `JsonSettings(file, name, value=None, flags=None,
  to_json=None, from_json=None)` keeps `value` under the key `name` of a JSON
  file. It loads on creation and saves on `close()` or at the end of a `with`
  block. The `JsonSettingsFlag` flags `NO_IMPLICIT_LOAD`, `NO_IMPLICIT_SAVE`
  and `PRINT_DEBUG_MESSAGES` change this. Saving keeps the file's other keys.
  The module also has `assign_if_present` and `convert_to_json_and_back`.
- `ltbkit.window_settings`: `WindowSettings` is a frozen dataclass. Its fields
  are title, transparency, resizability, title bar, initial size and initial
  position.
- `ltbkit.enum_strings`: the `FeatureName` and `TextureFormat` enums, plus
  `feature_name_to_string` and `texture_format_to_string`. These accept a
  member, its short name or its full name. Unknown input returns
  `"Unknown WGPUFeatureName"` or `"Unknown WGPUTextureFormat"`.

## What it does not do

ltbkit does not open windows and does not talk to a GPU. `WindowSettings` only
describes a window. `FeatureName` and `TextureFormat` are only names. There is
no command-line program.

## Install

```
pip install .
```

## Example

```python
from enum import Enum

from ltbkit.enum_flags import has_flag, make_flags
from ltbkit.timers import ScopedTimer


class Mode(Enum):
    READ = 0
    WRITE = 1


flags = make_flags(Mode.READ, Mode.WRITE)
assert has_flag(flags, Mode.WRITE)

with ScopedTimer(lambda elapsed: print(f"took {elapsed} ns")):
    sum(range(1000))
```

## Tests

```
pip install .[test]
pytest
```