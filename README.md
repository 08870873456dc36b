# eostui

`eostui` holds building blocks for a terminal interface that administers EOS
storage clusters: width-aware text handling that understands ANSI escape
sequences, a small style system, layout helpers, the state of a log overlay,
MGM/QDB topology bookkeeping and shell hand-off to cluster nodes.

## Modules

- `eostui.ansi` — `strip_ansi`, `visible_width`, `cut`, `truncate`,
  `hardwrap` and `pad_visible_width`. Widths are counted in terminal cells
  (wide characters take two), and escape sequences are kept when text is cut.
- `eostui.styles` — `Style` (bold, 256-colour foreground and background,
  padding, a `"normal"` or `"rounded"` border, an optional wrapping width) with
  `Style.render`, and the `Styles` palette returned by `new_styles()`.
- `eostui.render` — `content_width`, `panel_width`, `render_overlay` (a popup
  centred over a body), `normalize_rendered_block`,
  `split_main_and_command_heights`, `layout_heights`, `filter_value_label`,
  `render_section_title`, `render_filter_summary` and
  `render_command_panel_lines`.
- `eostui.logview` — `LogTarget`, the target builders `mgm_log_targets`,
  `qdb_log_targets` and `fst_log_targets`, `apply_log_filter`,
  `render_wrapped_log_lines`, `log_viewport_width`, `visible_log_window`, and
  `LogOverlay`, which keeps the current source, the loaded lines and a
  grep-style filter, and switches between sources with wrap-around.
- `eostui.topology` — `MgmRecord` and helpers that find hosts with unknown
  versions (`mgm_version_probe_targets`, `has_missing_mgm_versions`), collect
  and apply known versions, keep versions across refreshes
  (`merge_mgm_version_data`), and `compute_cluster_health`.
- `eostui.shell` — `build_shell_command` builds an `ssh -t` command line
  (through a jump host with `-J` when one is given) or falls back to `$SHELL`,
  then `/bin/bash`; `run_shell` runs it attached to the terminal and returns
  its exit status.

## Examples

Case-insensitive log filtering; an empty filter keeps every line:

```python
from eostui.logview import apply_log_filter

lines = ["INFO started", "ERROR disk full", "info done"]
apply_log_filter(lines, "info")   # ["INFO started", "info done"]
apply_log_filter(lines, "")       # all three lines
```

A log overlay on the logs of an MGM host:

```python
from eostui.logview import LogOverlay, mgm_log_targets

overlay = LogOverlay.open(mgm_log_targets("mgm1"))
overlay.title                 # "MGM Log  [mgm1]"
overlay.switch_source(1)      # the xrdlog file target
```

Measuring and padding styled text:

```python
from eostui.ansi import pad_visible_width, visible_width

visible_width("\x1b[1mab\x1b[0m")   # 2
pad_visible_width("abc", 5)         # "abc  "
```

Sharing rows between the main body and the command panel:

```python
from eostui.render import split_main_and_command_heights

split_main_and_command_heights(30, True)    # (20, 10)
split_main_and_command_heights(30, False)   # (30, 0)
```

Cluster health and shell commands:

```python
from eostui.shell import build_shell_command
from eostui.topology import compute_cluster_health

compute_cluster_health(["online"], ["booted"])    # "OK"
compute_cluster_health(["offline"], ["booted"])   # "WARN"
build_shell_command([], "node1", "")              # ["ssh", "-t", "node1"]
```

## What the package does not do

There is no full-screen application and no command to run. The package has no
list of views or hotkeys, does not react to key presses, does not save or
restore interface state between runs, and does not run any EOS commands to
load cluster data or logs: callers supply the records and log lines
themselves.

## Tests

The test suite uses pytest and is declared in the `test` extra.