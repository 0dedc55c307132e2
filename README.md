# coursekit

Small, self-contained utilities with no third-party dependencies.

## Modules

### `coursekit.scores`

- `average(scores)` returns the mean of the scores that lie in 0..100.
  Scores outside that range are ignored. If no scores are left, it returns `0.0`.
- `first_last(values, target)` returns the first and last index of `target`
  as a tuple. It returns `(-1, -1)` when `target` does not occur.
- `count_segments(values)` splits `values` on `-1` and counts the segments
  that contain three consecutive rising integers, such as `4, 5, 6`.
  It returns `0` for fewer than three values.
- `count_critical_windows(readings)` counts the windows of five consecutive
  readings that are critical. A window is critical if any one of these holds:
  - more than two of its readings are at least 70;
  - none of its readings is above 150;
  - its mean, truncated toward zero, is at least 90.

### `coursekit.grades`

- Mappers from a score to a grade string:
  - `standard_mapper` gives A–F in steps of ten.
  - `plusminus_mapper` gives A+ down to D-, and F.
  - `passfail_mapper` gives "P" for 60–100 and "F" otherwise.
- `map_scores(scores, mapper)` applies a mapper to every score and returns a list.
- `compute_distribution(grades)` counts each grade into a dict. The grade seen
  first for the most recent time comes first, so the first grade met is listed last.
- `format_distribution(distribution)` renders the distribution as text. The
  heading is `Grade Distribution:` and each following line reads `Grade <grade>: <count>`.
- `print_distribution(distribution)` prints that text.

### `coursekit.passwords`

- `check_cases(password)` is true when the text holds all four of:
  - an ASCII upper-case letter;
  - a lower-case letter;
  - a digit;
  - one of `@ # $ ^ & *`.
- `diff_pass(new_pw, curr_pw)` is true when the two differ.
- `validate_password_weak(new_pw, curr_pw)` returns `PwStatus.OK` if all of
  these hold, and `PwStatus.WEAK` otherwise:
  - the new password is at least 8 characters long;
  - it passes `check_cases`;
  - it differs from the current one.
- `validate_password(new_pw, history)` works in three steps:
  1. It runs the weak check against the newest entry of a `PasswordHistory`.
  2. It returns `PwStatus.SIMILAR` if the password is one replacement, one
     insertion or one deletion away from any of the three stored entries.
  3. Otherwise it records the password with `PasswordHistory.push` and returns `PwStatus.OK`.

  A `PasswordHistory` holds exactly three entries, newest first, each cut to 1023 characters.

### `coursekit.filesystem`

- `create_file(name, size)` and `create_folder(name)` build `FSNode` objects.
  A node of size 0 counts as a folder.
- `FSNode.add_child(child)` appends a child and sets its parent.
- `compute_total_size(node)` sums the sizes of all files below a node.
- `format_structure(node, indent)` renders the tree with two spaces per level.
  Folders appear as `[DIR] name` and files as `name (size)`.
- `print_structure(node, indent)` prints that rendering.

### `coursekit.library`

A `Catalog` of `Book` records (`id`, `title`, `author`).

- `load_catalog(filename)` reads one book per line in the form `id, title, author`.
  - Empty fields between commas are dropped.
  - The id is the leading integer of the first field.
  - Lines are skipped if the id is not positive, a field is missing, or the
    title or author is empty after trimming.
  - Lines longer than 1023 characters are read in pieces.
  - At most 1000 books are loaded.
- `Catalog.search_by_title(substr, max_results)` and
  `Catalog.search_by_author(substr, max_results)` return matching books in
  catalogue order. Matching ignores ASCII case. With no `max_results`, all
  matches are returned.
- `contains_ignore_case(haystack, needle)` is the matching test the searches use.
- `format_book(book)` renders a book as `ID:`, `Title:` and `Author:` lines.

## Installation

```
pip install .
```

## Usage

```python
from coursekit.grades import map_scores, standard_mapper, compute_distribution, print_distribution

grades = map_scores([95, 82, 91, 40], standard_mapper)
print_distribution(compute_distribution(grades))
```

```python
from coursekit.filesystem import create_folder, create_file, compute_total_size, print_structure

root = create_folder("root")
root.add_child(create_file("notes.txt", 120))
print(compute_total_size(root))
print_structure(root, 0)
```

```python
from coursekit.passwords import PasswordHistory, validate_password

history = PasswordHistory()
print(validate_password("Abcdef1@", history))
```

## Book catalogue command

```
coursekit-library [CATALOG] [QUERY] [--max-results N]
```

The arguments are:

- `CATALOG` defaults to `books.csv`.
- `QUERY` defaults to `harry`.
- `--max-results` defaults to 10.

The command prints every book whose title contains the query, ignoring case.
If the file cannot be read or holds no valid books, it prints `Failed to load catalog` and exits with status 1.

## What it does not do

The catalogue is read-only. Nothing in the package adds, edits, deletes or saves books. The only command is the title search above.

## Running the tests

```
pip install .[test]
pytest
```