# taskmgr

A small command-line task manager. Tasks are kept in a file in the current
directory: `tasks.json` by default, or `tasks.csv` when the environment
variable `TM_STORAGE` is set to `csv`.

## Installation

```
pip install .
```

This installs the `tm` command.

## Usage

List all tasks (either form works):

```
tm
tm list
```

The list is a table with the columns ID, Description, Status and Created.
Descriptions longer than 18 characters are cut to their first 15 characters
followed by `...`. The status column shows `Todo`, `InProgress` or
`Complete`; the creation time is shown in UTC as `YYYY-MM-DD HH:MM`.

Add a task. Every word after `add` becomes part of the description:

```
tm add Write the quarterly report
```

Each task is given a short ID of six letters and digits, derived from the
time it was created. In the commands below, any unambiguous prefix of that ID
can be used.

Change a task's status:

```
tm 3fA t    # Todo
tm 3fA p    # In Progress
tm 3fA c    # Complete
```

Delete a task:

```
tm 3fA delete
```

If a prefix matches no task, `tm` says so. If it matches more than one task,
`tm` lists the matching tasks (the first four characters of each ID and its
description) and asks for a more specific ID.

Any other arguments are reported as `Error: Unknown command: ...`. Errors are
printed to standard output and the command always exits with status 0. A
storage file that cannot be read is treated as empty, and a failure to write
it is not reported.

## Storage

| `TM_STORAGE`                 | File         |
|------------------------------|--------------|
| unset, `json`, anything else | `tasks.json` |
| `csv`                        | `tasks.csv`  |

The value is not case sensitive.

The JSON file holds an indented array of objects with the keys `id`,
`description`, `status` and `created` (an ISO 8601 UTC timestamp). The CSV
file holds the same fields as columns under a header line; an empty task list
is written as an empty file.

## Using it as a library

```python
from taskmgr.manager import TaskManager
from taskmgr.storage import JsonStorage

manager = TaskManager(JsonStorage("tasks.json"))
manager.load()
manager.add_task("Review pull requests")
manager.save()
print(manager.format_tasks())
```

`TaskManager` also offers `find_task_by_prefix`, `update_task_status`,
`delete_task` and `complete_task`. Lookups by prefix raise
`taskmgr.manager.TaskLookupError`; storage failures raise
`taskmgr.storage.StorageError`. `taskmgr.storage.create_storage` picks a
storage from `TM_STORAGE` as the command does, and `taskmgr.cli.parse_args`
turns an argument list into a command object.

## Running the tests

```
pip install .[test]
pytest
```