# rustdrill

A library of worked solutions to small programming drills, plus two helpers
for a Rust exercise workspace: writing a `rust-project.json` file for
rust-analyzer, and printing coloured status lines in the terminal.

## Installation

```
pip install .
```

The only runtime dependency is `rich`.

## Drills

The `rustdrill.drills` package holds the solutions, grouped by topic:

- `rustdrill.drills.basics`: `calculate_price_of_apples`, `transformer` with
  the `Uppercase`, `Trim` and `Append` commands, `sale_price`, `is_even`,
  `square`, `bigger`, `foo_if_fizz`, `animal_habitat`, `is_a_color_word`,
  `trim_me`, `compose_me`, `replace_me` and `longest`.
- `rustdrill.drills.models`: `ReportCard`, `Order` and
  `create_order_template`, `Package`, `RobotState` with the `ChangeColor`,
  `Echo`, `Move` and `Quit` messages, `Point`, `Wrapper`, `Rectangle`, and
  the cons list `Cons` / `Nil` with `create_empty_list` and
  `create_non_empty_list`.
- `rustdrill.drills.baskets`: `vec_loop`, `vec_map`, `make_fruit_basket`,
  `Fruit` and `fill_fruit_basket`, `Team` and `build_scores_table`, and
  `maybe_icecream`.
- `rustdrill.drills.errors`: `generate_nametag_text`, `total_cost`,
  `PositiveNonzeroInteger`, `CreationError`, `ParsePosNonzeroError` and
  `parse_pos_nonzero`.
- `rustdrill.drills.iterators`: `capitalize_first`,
  `capitalize_words_vector`, `capitalize_words_string`, `divide` with
  `DivisionError`, `NotDivisibleError` and `DivideByZeroError`,
  `result_with_list`, `list_of_results`, `factorial`, and the `Progress`
  counters `count_for`, `count_iterator`, `count_collection_for` and
  `count_collection_iterator`.
- `rustdrill.drills.traits`: `append_bar`, `Licensed`, `SomeSoftware`,
  `OtherSoftware`, `compare_license_types`, the clone-on-write sequence `Cow`
  with `abs_all`, `byte_counter`, `char_counter` and `num_sq`.

Errors are raised as exceptions:

```python
from rustdrill.drills.iterators import divide, NotDivisibleError

divide(81, 9)        # 9
try:
    divide(81, 6)
except NotDivisibleError as exc:
    print(exc.dividend, exc.divisor)   # 81 6
```

## rust-analyzer project file

`rustdrill.project.RustAnalyzerProject` collects one `Crate` (edition 2021,
`cfg` of `test`) for every `.rs` file and writes them as compact JSON:

```python
from rustdrill.project import RustAnalyzerProject

project = RustAnalyzerProject()
project.get_sysroot_src()        # RUST_SRC_PATH, or asks `rustc --print sysroot`
project.exercises_to_json()      # every .rs file below ./exercises
project.write_to_disk()          # ./rust-project.json
```

`get_sysroot_src` runs `rustc` only when `RUST_SRC_PATH` is not set.

## Status lines

`rustdrill.ui.warn(message)` prints a red line and
`rustdrill.ui.success(message)` a green one. When the `NO_EMOJI` environment
variable is set (`rustdrill.ui.no_emoji()` returns True), plain `!` and `✓`
markers are used instead of emoji.

## What this package does not do

There is no command-line program. The package does not compile, run, test or
lint exercise files, does not read an exercise list, does not track which
exercises are done, and has no watch mode, hints or reset. It also has no
solutions for the conversion drills (parsing people, colours and averages).

## Running the tests

```
pip install .[test]
pytest
```