# gitgud-ui

View-model components for a Git client's user interface. None of them depends
on a drawing toolkit. Each one holds the state and rules of one panel, and a
front end only has to draw it.

## Components

- `gitgud_ui.recent_repos.RecentRepos` keeps the repositories opened most
  recently, newest first. Adding a path that is already in the list moves it to
  the front. The list is capped at `max_count` entries, 10 by default. It can
  be saved to and loaded from a plain text file with one path per line
  (`save_to_file`, `load_from_file`). `default_path`, `load_default` and
  `save_default` use a file in the user's configuration directory.
- `gitgud_ui.error_dialog.ErrorDialog` holds the state of a modal error dialog:
  `show_error`, `hide` and `is_visible`. A message longer than 100 bytes
  offers a details view (`has_details`, `toggle_details`).
- `gitgud_ui.virtual_scroll.VirtualScrollState` and `VirtualScroll` work out
  which items of a long list are visible. Rows may all have the same height or
  different heights. They support scrolling by offset, to an item, to the top
  or bottom, and by ratio. `VirtualScroll.handle_wheel` and
  `VirtualScroll.handle_key` (with a `ScrollKey`) turn input into scrolling.
- `gitgud_ui.branch_list`:
  - `Branch` describes a branch.
  - `BranchList` filters branches by name, ignoring case.
  - `branch_label` gives the icon and name shown for a branch.
  - `can_checkout` is false for the current branch.
- `gitgud_ui.file_list`:
  - `FileChange` and `FileStatus` describe a changed file; `FileStatus.icon`
    gives its icon.
  - `FileList` holds the state of a staged or unstaged list: the filter,
    checked files and the heading.
  - `FileList.bulk_action` and `FileList.selected_action` produce a
    `PendingAction` for "Stage All", "Unstage All", "Stage Selected" or
    "Unstage Selected".
  - `file_label` gives the icon and file name shown for a file.
- `gitgud_ui.commit_panel` holds the commit panel's rules:
  - `can_commit` needs staged files and a valid message.
  - `staged_status` and `validity_label` give the panel's status texts.
  - `character_count` counts summary plus description in UTF-8 bytes.
  - `commit_success_message` gives the notice shown after a commit.
  - `CommitPanel` holds the author-override fields.
- `gitgud_ui.main_window.MainWindow` ties these together:
  - It opens repositories through a `loader` callable that you supply.
  - It manages the open dialog (`request_open`, `cancel_open`).
  - It closes repositories (`close_repository`).
  - It passes errors to the error dialog (`sync_error`).
  - It records opened repositories in `RecentRepos` and saves them when used
    as a context manager or through `save_recent_repos`.

## Example

```python
from gitgud_ui.recent_repos import RecentRepos

recent = RecentRepos(5)
recent.add("/home/user/project")
recent.add("/home/user/other")
print(recent.get())            # most recent first
recent.save_to_file("recent.txt")
again = RecentRepos.load_from_file("recent.txt")
assert len(again) == 2
```

```python
from gitgud_ui.virtual_scroll import VirtualScrollState

state = VirtualScrollState.with_uniform_height(100, 20.0)
state.update_viewport(400.0)
print(state.visible_range)     # range(0, 21)
```

## What this package does not do

- It draws nothing and starts no application. A front end has to render these
  models.
- It performs no Git operations itself. It does not read status, stage,
  commit, check out or compute diffs. `MainWindow` only calls the `loader` you
  pass it, and `PendingAction` values have to be carried out by your code.
- There is no diff viewer component.

## Running the tests

```
pip install -e ".[test]"
pytest
```