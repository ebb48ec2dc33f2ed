# rustrepl

Building blocks for an interactive Rust REPL in the terminal: settings,
themes, input history, line editing, key bindings, command recognition and
the formatting of compiler output. A small line-based session ties them
together behind the `rustrepl` command.

## Installing

```
pip install .
```

The `rustrepl` command checks that `cargo` is on your `PATH` before it
starts a session, and stops with exit status 1 if it is not.

## Command line

```
rustrepl --help           # version and where the config file lives
rustrepl --version        # print the version
rustrepl --reset-config   # put every setting back to its default, then start
rustrepl                  # start a session
```

An unknown first argument is reported on stderr and the session starts anyway.

On the very first run (while the `first_irust_run` option is true) the
command offers to install the optional tools racer, rustfmt, cargo-edit and
cargo-asm that are missing, running `rustup` and `cargo install` for each
one you accept.

### The session

The session prints a welcome banner (the `welcome_msg` option, or
"Welcome to IRust") and reads input with the `input_prompt` prompt. Input
with unclosed brackets, or ending in `:`, `.` or `=`, continues on a new
line. Ctrl-D asks whether to exit; yes is the default. On exit the history,
options and theme are saved.

These commands work in the session:

- `::<command> <args>` – run a shell command and print its output.
- `:cd [dir]` – change directory; no argument goes home, `-` goes back.
- `:color <key> <value>` – set a theme colour; `:color reset` restores them.
- `:check_statements true|false` – set the `check_statements` option.
- `:toolchain`, `:executor` – show the configured toolchain or executor.
- `:irust` – print the mascot.

Entered lines go into the history according to `add_irust_cmd_to_history`
and `add_shell_cmd_to_history`.

## What it does not do

The session does not compile or evaluate Rust code. Plain code, and the
commands `:help`, `:reset`, `:show`, `:pop`, `:sync`, `:edit`, `:add`,
`:load`, `:reload`, `:type`, `:del`, `:time`, `:time_release`, `:bench`,
`:asm`, and `:toolchain`/`:executor` with an argument, are recognised but
answered with an error saying the compilation backend is not available.
There is no code completion, no syntax highlighting of input, and no
full-screen key-by-key editor; `rustrepl.editor` and `rustrepl.keymap`
provide the editing logic but the session reads whole lines.

## Modules

- `rustrepl.options` – `Options`, every setting with its default, read with
  `Options.load()` and written with `save()` as TOML in the user's
  configuration directory (`config_path()`); `reset()`;
  `should_push_to_history(buffer)`.
- `rustrepl.theme` – `Theme` with named colours (`"dark_red"`, `"cyan"`, …)
  and `#rrggbb` values, `load_theme()`, `Theme.save()`, `Theme.set(key, value)`,
  `Theme.reset()`, and `theme_color_to_term_color()` returning a `Color` or
  `RgbColor`.
- `rustrepl.history` – `History.load()`, `up`/`down` filtered by the current
  input, `push`, `reverse_find_nth(needle, n)`, `lock`/`unlock` and `save()`.
- `rustrepl.format` – `PrinterItem`, `PrintQueue`, `format_err`,
  `format_eval_output` and `format_check_output` for cargo output.
- `rustrepl.help` – `parse_markdown(text)`, colouring markdown into a
  `PrintQueue`.
- `rustrepl.art` – `fit_msg`, `welcome_message`, `ferris()` and
  `spinner_frames()`.
- `rustrepl.commands` – `classify_command` returning a `CommandKind`,
  `is_statement`, `extract_type`, `timing_code`, `command_argument`,
  `parse_bool_argument`, `resolve_cd_target`, `replace_marker` and
  `run_shell`.
- `rustrepl.editor` – `LineBuffer` (insert, backspace, delete, word motions,
  `delete_next_word`, home/end) and `HistorySearch` for reverse incremental
  search.
- `rustrepl.keymap` – `key_to_action(key, modifiers, char)` mapping `Key` and
  `Modifier` to an `Action`.
- `rustrepl.session` – `decide_enter` returning an `EnterOutcome`,
  `incomplete_input`, `input_is_cmd_or_shell`, `record_input`,
  `history_step` and `confirm_exit`.
- `rustrepl.scripts` – `GlobalVariables`, the `Script` hooks,
  `NumberedPromptScript` (`In [n]: ` / `Out[n]: `) and
  `resolve_output_prompt`.
- `rustrepl.dependencies` – `dep_installed`, `check_required_deps`,
  `optional_dependencies` and `warn_about_opt_deps(options, ask)`.
- `rustrepl.cli` – `handle_args(args, options)` and `main(argv=None)`.

## Using it as a library

```python
from rustrepl.options import Options
from rustrepl.session import decide_enter
from rustrepl.editor import LineBuffer

options = Options()
print(options.input_prompt)                        # "In: "
print(options.should_push_to_history(":add regex"))  # True

print(decide_enter("fn main() {", force_eval=False))  # EnterOutcome.NEW_LINE

line = LineBuffer()
line.insert("let x = 1;")
line.word_left()
print(line.cursor)
```