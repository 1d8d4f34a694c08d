# testtalk

This package holds a few small functions and two caches whose entries expire over time. The
code is written to be easy to test. Both caches accept a `clock` callable, so a test can pass
in a fake clock and check expiry without waiting on real time.

## Installation

```
pip install .
```

To install the test dependencies and run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `testtalk.adder.add_numbers(x, y)` returns `x + x`. It takes `y` but does not use it.
- `testtalk.pubadder.add_numbers(x, y)` returns `x + y`.
- `testtalk.table.do_math(num1, num2, op)` works on two integers. The operator decides what
  it returns:
  - `"+"` gives the sum and `"-"` gives the difference.
  - `"*"` also gives the sum of the operands.
  - `"/"` divides and truncates toward zero. A zero divisor raises
    `ZeroDivisionError("division by zero")`.
  - Any other operator raises `ValueError("unknown operator <op>")`.
- `testtalk.bench.file_len(path, bufsize)` reads the file in chunks of `bufsize` bytes and
  returns the total number of bytes. If `bufsize` is less than 1 it raises `ValueError`. A
  file that is missing raises the usual `OSError`.
- `testtalk.text.count_characters(file_name)` returns the number of UTF-8 characters in a
  file. Each byte that is not valid UTF-8 counts as one character. A file that is missing
  raises `OSError`.
- `testtalk.cleanup.find_address(db, name)` returns an `Address`, which is a frozen
  dataclass with a `country` field.
- `testtalk.cachev1.Cache(ttl, clock=time.monotonic)` is a thread-safe cache:
  - Each entry expires `ttl` seconds after it is set.
  - `set(key, value)` stores the value and restarts its expiry timer.
  - `get(key)` returns the value, or `None` if the key is missing or has expired. An expired
    entry is removed at that point.
- `testtalk.cachev2.Cache(ttl, sweep_interval, clock=time.monotonic)` is the same cache with
  these additions:
  - A daemon thread calls `sweep()` every `sweep_interval` seconds of real time.
  - `sweep()` removes expired entries and returns how many it removed. You can also call it
    directly.
  - `len(cache)` counts the stored entries. Entries that have expired but are not yet removed
    are included.
  - `cache.stats` is a `Stats` object that counts removals in two fields,
    `removed_by_sweep` and `removed_by_get`.
  - `done()` stops the sweeper thread. Calling it more than once is safe.
  - The cache can be used as a context manager, and it calls `done()` on exit.
  - A `sweep_interval` that is not positive raises `ValueError`.

## Example

```python
from testtalk.cachev1 import Cache

now = 0.0
cache = Cache(ttl=1.0, clock=lambda: now)
cache.set("greeting", "hello")
assert cache.get("greeting") == "hello"
now = 1.5
assert cache.get("greeting") is None
```

```python
from testtalk.cachev2 import Cache

with Cache(ttl=2.0, sweep_interval=1.0) as cache:
    cache.set("key", "hello")
    print(len(cache), cache.stats)
```

## Limitations

- `find_address` does not run any query against `db`. It returns
  `Address(country="Australia")` for every name.
- Because `None` is what `get` returns for a missing key, a value of `None` cannot be told
  apart from a missing key.
- The package is a library only. It provides no command-line tool.