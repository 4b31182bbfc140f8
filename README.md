# gotask

A small command-line todo manager. Tasks are kept in named groups; one group
is "in use" at a time, and the task commands act on that group.

## Installation

```
pip install .
```

This installs the `gotask` command.

## Data location

Everything lives under `./store` in the current working directory:

- `./store/configurations/group.txt` holds the name of the group in use.
- `./store/data/<group>.json` holds the tasks of each group as a JSON list.

The folders and the (empty) group file are created on every run if missing.

Each stored task has the fields `Id`, `Group`, `Task`, `Done`, `CreatedAt` and
`CompletedAt`. Timestamps are RFC 3339; a task that is not done has
`CompletedAt` set to `0001-01-01T00:00:00Z`.

## Commands

Group commands:

```
gotask usegrp <name>        # create the group if needed and start using it
gotask showgrp              # list groups; the group in use is shown in green
gotask dropgrp <name>       # delete a group and its tasks
gotask truncategrp <name>   # remove all tasks from a group, keep the group
```

`usegrp` stores the group name in lower case; `dropgrp` and `truncategrp`
look the group up in lower case too. Dropping the group in use clears the
selection.

Task commands (they act on the group in use):

```
gotask add "<task description>"   # add a task
gotask done <id>                  # mark a task as done
gotask ls                         # show the tasks as a table
```

If no group is in use, these commands report
`no group selected. use 'usegrp <group_name>' to select a group`.

Each task gets a random 32-character hexadecimal id, shown by `gotask ls`.
A task whose description matches one already in the group is refused, and so
is marking a task done a second time.

`ls` prints a bordered table with a status dot (yellow for pending, green for
done), the id, the task, whether it is done, when it was created and when it
was completed (or `pending`), with times shown as `02 Jan 06 15:04 MST`. A
footer counts the pending tasks.

Errors are printed as messages; the command always exits normally.

## Example

```
$ gotask usegrp work
Using: work
$ gotask add "write report"
Todo added successfully!
$ gotask ls
```

## Using it from Python

- `gotask.storage.FileStorage(root)` creates the `store` layout below `root`
  and reads and writes task files (`read`, `write`, `group_path`).
- `gotask.groups` has `create_group`, `current_group`, `list_groups`,
  `drop_group` and `truncate_group`; the listing functions take an optional
  output stream.
- `gotask.todo.Todos` has `add`, `complete`, `render` (returns the table as a
  string), `count_pending` and `delete`.
- `gotask.models` has the `Item` dataclass, `new_id()` and `TodoError`, which
  every operation raises on failure.
- `gotask.table.render_table` draws the box table used by `ls`.

## What it does not do

There is no command to delete or edit a single task. `Todos.delete` only
removes an item from the in-memory list and does not save the change.