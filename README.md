# termite

The building blocks of a keyboard-driven terminal e-mail client, packaged as a
plain Python library with no third-party dependencies.

## What is inside

- `termite.metrics`: inbox-zero productivity tracking kept in SQLite.
  - `tracker.MetricsTracker` counts cleared, sent and inbox-zero events per
    day and account (`record_cleared`, `record_sent`, `record_inbox_zero`),
    adds time spent in the application (`flush_session`), sums the day
    (`today_summary`) and all time (`all_time_totals`), works out the current
    and longest streaks (`current_streak`, `compute_streaks`) and unlocks
    milestones (`check_milestones`, `mark_milestone_shown`). It creates its
    tables on first use (`ensure_schema`).
  - `milestones.milestones_by_category` lists the milestone definitions of
    one category: `cleared`, `sent`, `zero` or `streak`.
  - `export.export_json` and `export.export_csv` write every daily row and
    milestone to a file; `gather_export_data` returns them as dataclasses.
- `termite.notifications`:
  - `manager.Manager` sends new-mail notices to the enabled backends of a
    `NotificationConfig` (`notify_on` is `"none"`, `"unread"` or `"all"`),
    and `format_notification` builds the title and body.
  - `desktop.DesktopNotifier` runs `osascript` on macOS and `notify-send` on
    Linux and the BSDs.
  - `tmux.TmuxNotifier` renames the current tmux window to show the unread
    count, and does nothing outside tmux.
  - `status.StatusWriter` keeps a `status.json` file (unread count, update
    time, running flag) current for status-bar scripts.
- `termite.commands`: the command-bar parser. `builtin.default_registry`
  returns a `registry.Registry` with `account`, `connect`, `daemon`, `inbox`,
  `metrics`, `search`, `shortcuts` and `theme` registered. Dispatching a line
  returns a message dataclass describing what was asked for, or a
  `CommandErrorMsg`.
- `termite.themes`: TOML colour themes (`theme.parse_theme`), their discovery,
  validation and switching (`manager.ThemeManager`), and the per-component
  `styles.Styles` built from a theme (`build_styles`), each a `Style` that can
  `render` text with ANSI colours, padding, borders and margins.

## Installing

```
pip install .
```

Running the tests:

```
pip install ".[test]"
pytest
```

## Examples

Dispatching a command-bar line:

```python
from termite.commands.builtin import default_registry, slugify

registry = default_registry()
print([command.name for command in registry.all()])
print(registry.dispatch(":inbox create Work Stuff"))
# CreateInboxMsg(id='work-stuff', label='Work Stuff')
print(slugify("Work Stuff"))   # work-stuff
```

Recording metrics and unlocking milestones:

```python
import sqlite3
from termite.metrics.tracker import MetricsTracker

tracker = MetricsTracker(sqlite3.connect(":memory:"))
tracker.record_cleared("me@example.com", 12)
tracker.record_inbox_zero("me@example.com")
print(tracker.today_summary())
print([m.label for m in tracker.check_milestones()])
```

Listing the streak milestones:

```python
from termite.metrics.milestones import milestones_by_category

for milestone in milestones_by_category("streak"):
    print(milestone.threshold, milestone.label)
```

Building the text of a new-mail notice:

```python
from termite.notifications.manager import Message, format_notification

title, body = format_notification([
    Message(from_addr="alice@example.com", subject="Lunch?", is_read=False),
])
```

Switching themes: `ThemeManager` reads `<id>.toml` files from a built-in
directory and from a user directory (by default `~/.termite/themes`, created
if missing); user themes override built-in ones of the same ID. It applies the
theme named by `default` (`"dark"`) when it is created, so that theme must
exist in one of the two directories.

```python
from termite.themes.manager import ThemeManager

manager = ThemeManager(builtin_dir="themes")
print([info.id for info in manager.discover()])
message = manager.apply_msg("light")
print(message.styles.title.render("Inbox"))
```

## What this package does not do

- It has no e-mail provider support: it does not connect to IMAP or SMTP
  servers, run OAuth sign-in or store credentials. The `termite.providers`
  sub-package holds no modules.
- It has no terminal user interface and no command-line program; the command
  registry only turns command-bar text into message objects for an
  application to act on.
- It ships no theme files; the built-in theme directory is supplied by the
  caller.