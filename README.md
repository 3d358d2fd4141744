# civokit

Building blocks for cloud command-line tools. It provides coloured terminal
messages and yes/no confirmations. It prints structured output as tables,
key/value listings, JSON or custom templates. It also handles Kubernetes
configs, marketplace application requests and node pools.

## Installation

```
pip install civokit
```

To run the tests:

```
pip install "civokit[test]"
pytest
```

## Coloured messages (`civokit.colors`)

```python
from civokit.colors import green, color_status, warning, error

print(green("ready"))
print(color_status("ACTIVE"))   # green; unknown statuses become a red "Unknown"
warning("quota nearly reached: %s", "90%")   # "Warning: ..." on stderr
error("could not find %s", "web-1")          # "Error: ..." on stderr
```

The colour functions are `green`, `yellow`, `orange` (rendered as yellow),
`blue`, `magenta` and `red`. Each one wraps its text in ANSI escape codes.
The stderr printers are `error`, `info` and `warning`. They take
`%`-style arguments and end the line. `yellow_confirm` and `red_confirm`
write a "Warning:" or "IMPORTANT:" prompt with no trailing newline.

## Structured output (`civokit.output_writer`)

```python
from civokit.output_writer import OutputWriter

ow = OutputWriter()
ow.start_line()
ow.append_data("ID", "1")
ow.append_data("Key", "Raspberry")
ow.start_line()
ow.append_data("ID", "2")
ow.append_data("Key", "Pi")

ow.write_table()                      # bordered table with a header row
ow.write_custom_output("ID: Key")     # "1: Raspberry", "2: Pi"
ow.write_multiple_objects_json(pretty=True)
```

- `append_data_with_label(key, value, label)` shows a column under a label
  that differs from its key.
- `OutputWriter.from_map({...})` builds a writer that holds one row.
- `write_key_values()` prints the first row as right-aligned `label : value`
  lines.
- `write_single_object_json(pretty)` prints the first row as a JSON object.
  It raises `ValueError` when there is no row.
- The JSON writers leave out empty values and sort the keys.
- `to_json(value, pretty)` prints any JSON-serialisable value.
- In `write_custom_output`, key names in the template are replaced with that
  row's values, longest names first. Literal `\t` and `\n` become a tab and a
  newline.
- `write_header(label)` prints `label:`. `write_subheader(label)` centres
  the label between dashes.

## Confirmations (`civokit.confirmation`)

```python
from civokit.confirmation import user_confirmed_deletion

if user_confirmed_deletion("instance", False, "web-1", None):
    ...
```

These functions prompt on stderr and read one line. By default they read
from standard input. Any object with a `readline` method can take its
place. The answers `y`, `ye` and `yes` count as consent, in any case.

- `ask_for_confirm` raises `ValueError` for any other answer.
- `user_confirmed_deletion`, `user_confirmed_unassign` and
  `user_confirmed_overwrite` return a boolean instead. They return `True`
  straight away when `ignoring_confirmed` is true.
- `user_accepts(stream)` reads an answer without a prompt and compares it
  case-sensitively. It raises `ValueError` for a refusal and `EOFError`
  when the input ends early.

## Kubernetes helpers (`civokit.kubernetes`)

- `obtain_kube_config(path, config_text, merge, switch_context, cluster_name)`
  writes a kubeconfig with mode 0600 and creates `~/.kube` if it is missing.
  - With `merge`, it combines the new config with the file at `path` by running
    `kubectl config view --merge --flatten`. On Windows it runs this through
    `powershell`.
  - With `merge` and `switch_context`, it then runs `kubectl config use-context`.
  - It raises `RuntimeError` when kubectl fails.
- `requested_split(apps, "app[:plan],...")` checks requests against a list of
  `MarketplaceApplication` objects, each with its `AppPlan`s.
  - A missing or unknown plan is replaced by the application's first plan.
  - An unknown application raises `UnknownApplicationError`.
  - A plan for an application that has no plans raises `ValueError`.
- `remove_application_from_installed_list(installed, "a,b")` returns the names
  of the `InstalledApplication`s that remain, joined by commas.
- `remove_node_pool(pools, pool_id, names)` returns new lists and leaves its
  inputs unchanged. The last `NodePool` takes the removed pool's place.
- `update_node_pool(pools, pool_id, count)` also returns a new list and leaves
  its input unchanged.
- `trim_id` keeps the first six characters of an identifier.
- `size_type` classifies a size name as `Database`, `Kubernetes`, `KfCluster`
  or `Instance`.

## Odds and ends

- `civokit.formatting`:
  - `bool_to_yes_no` returns `Yes` or `No`.
  - `get_string_map("a:1,b:2")` returns a dict. It raises `ValueError` for an
    entry without `:`.
  - `start_time()` and `track_time(start)` report elapsed time as
    `"M min S sec"`. `seconds_to_minutes` gives the same format for a number
    of seconds.
  - `ObjectList` is an id and name pair.
- `civokit.names.random_name()` returns names such as `misty-river`.
- `civokit.checks`:
  - `check_os` returns `windows`, `darwin`, `linux` or `""`.
  - `check_quota_percent(limit, usage)` returns `usage/limit`. It is yellow
    from 80%, red at 100% and green otherwise.
  - `valid_name_length` returns `True` when a name is longer than 63 bytes.
  - `can_manage_volume` returns `True` for a volume whose `cluster_id` is empty.
  - `validate_ssh_key` raises `ValueError` unless the text holds an
    authorized_keys style public key.

## What it does not do

civokit has no cloud API client and no account configuration. It does not
fetch sizes, regions, quotas or marketplace applications. Callers pass these
in as plain objects. It installs no command-line program. It is a library to
build one with.