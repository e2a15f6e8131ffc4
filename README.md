# pave

`pave` puts your programs on the command line. It links an executable into a
per-user bin directory and records every link it makes in a small JSON
registry. You can then list the links, check whether they still work, and
remove them.

## Installation

```
pip install .
```

This installs the `pave` command. The same interface can be run with
`python -m pave.cli`.

## Where things go

| Platform | Bin directory                  | Registry                                                       |
|----------|--------------------------------|----------------------------------------------------------------|
| Linux    | `~/.local/bin`                 | `$XDG_DATA_HOME/pave/links.json` (default `~/.local/share`)     |
| macOS    | `~/bin`                        | `~/Library/Application Support/pave/data/links.json`           |
| Windows  | `%APPDATA%\pave\bin`           | `%APPDATA%\pave\data\links.json`                               |

These directories are created when they are needed. On other platforms there is
no bin directory, and creating or removing a link fails.

On Linux and macOS, `pave` creates a symbolic link. On Windows, it writes a
`.cmd` wrapper instead. If the bin directory is not on your `PATH`, `pave`
prints a warning when it creates or removes a link. On Linux and macOS, it also
prints the line to add to your shell profile.

## Usage

Link a program under a name:

```
pave link --name mytool --path ./build/mytool
```

The path is made absolute and must exist. If a file with that name is already
in the bin directory, the command fails.

See what is managed:

```
pave list
```

Each link is listed as `valid` or `broken`. A link is broken when the file it
points to is gone.

Show full details for every link, or for one link:

```
pave status
pave status --name mytool
```

Remove a link. This also drops it from the registry:

```
pave unlink --name mytool
```

If the link file is already gone, `unlink` still removes the entry from the
registry.

With no subcommand, `pave` prints its help. Errors go to standard error, and
the exit status is 1.

### Global options

These options can be given before or after the subcommand.

- `--verbose` prints extra detail about what is being done.
- `--dry-run` shows what `link` and `unlink` would do, without changing anything.
- `-V`, `--version` prints the version (`dev`). This option goes before the subcommand.

## Using it from Python

```python
from pave.linker import create_link, list_links, status_link, remove_link

create_link("mytool", "./build/mytool", verbose=False)
for entry in list_links(verbose=False):
    print(entry.name, entry.path, entry.status)
print(status_link("mytool"))
remove_link("mytool", verbose=False)
```

`create_link` and `remove_link` raise `pave.linker.LinkError` when they fail.
`status_link` returns `None` for an unknown name.

`pave.registry` exposes the registry itself: `load_registry()`, `Registry`
(with `add_link`, `remove_link`, `find_link`, `save`, `to_dict` and
`from_dict`) and `Link`. A registry file that cannot be read or parsed raises
`RegistryError`.

`pave.paths` resolves the platform directories: `get_config_dir()`,
`get_data_dir()`, `get_links_file_path()`, `get_bin_dir()` and
`is_path_in_path()`.

## What pave does not do

`pave` does not generate installation scripts. It only creates, lists, checks
and removes links.