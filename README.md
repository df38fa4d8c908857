# fuzzypick

An interactive fuzzy finder for the terminal. It walks a directory tree in
the background, lists every file it finds, and lets you narrow the list by
typing. When you press Enter, the chosen file's path (relative to the
searched directory) is printed to standard output, so it can be used in
shell pipelines. Quitting without a choice prints an empty line.

## Installation

```
pip install fuzzypick
```

## Usage

Search the current directory:

```
fuzzypick
```

Search another directory (`-dir` is accepted as well as `--dir`):

```
fuzzypick --dir path/to/project
```

If the directory does not exist, an error is printed to standard error and
the command exits with status 1.

Directories named `node_modules`, `.git`, `dist`, `build`, `.next`,
`target`, `bin`, `obj`, `vendor`, `.idea`, `.vscode`, `__pycache__`,
`.astro`, `.cache`, `.vercel`, `.netlify`, `.github`, `.wrangler`,
`.svelte-kit`, `.pnpm-store` and `.venv` are not descended into. Symbolic
links to directories are not followed.

Use the result in the shell:

```
vim "$(fuzzypick)"
```

### Modes and keys

The finder starts in **insert** mode, where what you type goes into the
search field and filters the list.

| Key | Insert mode | Normal mode |
| --- | --- | --- |
| `Enter` | choose the highlighted item | choose the highlighted item |
| `Esc` | switch to normal mode | quit without choosing |
| `Ctrl+C` | quit without choosing | quit without choosing |
| `i` | typed into the search | switch to insert mode |
| `↓` / `j` | move down (`j` is also typed) | move down |
| `↑` / `k` | move up (`k` is also typed) | move up |
| `←` / `→` | move the text cursor | previous / next page |
| `h` / `l` | typed into the search | previous / next page |
| `PgUp` / `PgDn` | — | previous / next page |
| `Backspace`, `Delete`, `Home`, `End` | edit the search | — |

Moving down past the last item of a page goes to the next page, and moving
up past the first goes to the previous one. The search field holds at most
156 characters.

Matching is case-insensitive. The characters of the query must appear in
the path in order; each matched character scores a point, with a bonus for
a match directly after the previous one and for a match at the start of a
word. Results are shown best first, and the matched characters are
highlighted.

A debug log is written to `~/.local/state/fzf_cli/debug.log`
(`%USERPROFILE%\AppData\Local\fzf_cli\debug.log` on Windows).

## Library use

The matching and file-walking parts can be used on their own:

```python
from fuzzypick.algo import fuzzy_find, fuzzy_match
from fuzzypick.files import FileCollector, walk_files

files = list(walk_files("."))          # relative paths, in lexical order
print(fuzzy_find("readme", files))     # matching paths, best first
print(fuzzy_match("rdm", "readme.md")) # score; 0 means no match

collector = FileCollector(".").start() # walks in a background thread
for batch in collector.batches():      # growing snapshots until done
    print(len(batch))
```

`fuzzypick.list_view` holds the paged result list (`ItemList`, `Paginator`,
`Mode`) and `fuzzypick.app` the search state (`Finder`, `TextInput`), the
terminal loop (`run`) and the command's entry point (`main`).

## Development

```
pip install -e ".[test]"
pytest
```