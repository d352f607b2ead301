# pipex

`pipex` runs two commands joined by a pipe. The first command reads its
input from a file. The second command writes its output to another file.
It does the same as this shell line:

```
< infile cmd1 | cmd2 > outfile
```

## Installation

```
pip install .
```

## Command line

```
pipex infile "cmd1 args" "cmd2 args" outfile
```

The command takes exactly four arguments. With any other count it prints
`Invalid number of arguments` to standard error and exits with status `1`.

- Each command is split on spaces, and empty fields are dropped. Quotes and
  other shell syntax are not interpreted.
- A command name that contains a `/` is used as given, if it is executable.
  Any other name is looked up in the directories listed in `PATH`, in order.
- The output file is created or truncated with mode `0644`.

Example:

```
pipex input.txt "grep error" "wc -l" count.txt
```

The exit status is the exit status of the second command. If the second
command was killed by a signal, the status is the signal number. Other
statuses:

- `127`: the command is empty, or it was not found.
- `126`: the program found is not executable.
- `1`: the output file cannot be opened, the pipe cannot be created, or the
  program could not be started.

If the input file cannot be opened, the error is printed to standard error.
The first command then does not run. The second command still runs, and its
input is empty.

## Library use

```python
import os

from pipex.cli import run_pipeline
from pipex.command import CommandError, resolve_command

status = run_pipeline("input.txt", "grep error", "wc -l", "count.txt", os.environ)

try:
    path, args = resolve_command("ls -l", {"PATH": "/bin:/usr/bin"})
except CommandError as err:
    print(err.status, err.message)
```

- `run_pipeline(infile, first_cmd, second_cmd, outfile, env=None)` returns
  the exit status described above. When `env` is not given it uses
  `os.environ`.
- `pipex.command.find_command_path(name, env)` returns the path of the
  executable, or `None`.
- `pipex.command.resolve_command(cmd, env)` returns `(path, args)`. If the
  command cannot be used, it raises `CommandError`. The error's `status` is
  126 or 127.
- `pipex.cli.main(argv=None)` is the entry point of the command line. It
  returns the exit status.

The package also has some smaller helpers:

- `pipex.textutil` holds string helpers: `split`, `atoi`, `itoa`, `strtrim`,
  `substr`, `strnstr`, `strncmp`, `strchr` and `strrchr`. The search
  functions return an index, or `None`.
- `pipex.printf` holds a small formatter with `format` and `printf`.
  - It supports the conversions `%c %s %d %i %u %x %X %p %%`.
  - `%s` of `None` gives `(null)`.
  - `%p` of `None` or of `0` gives `(nil)`.
  - An unknown conversion produces no output.
  - `printf` writes to standard output and returns the number of characters
    written.
  - `to_base` and `format_pointer` are also available.
  - `put_str`, `put_endl` and `put_nbr` write to a file descriptor.
- `pipex.lines` holds `LineReader` and `get_next_line`. They read a file
  descriptor one line at a time and return `bytes` with the newline kept.
  They return `None` at the end of input. `get_next_line` keeps separate
  state for each descriptor from 0 to 1023.

## Limitations

- Exactly two commands are supported. There is no support for longer
  pipelines, here-documents or appending to the output file.
- Command strings are not parsed like a shell parses them. There is no
  quoting, no escaping, no globbing and no variable expansion.

## Tests

```
pip install ".[test]"
pytest
```