# loutil

Small, dependency-free helpers for everyday work with lists, numbers and
strings. It also has tools to time calls, to retry them, to debounce and
throttle them, and to run saga-style transactions.

## Installation

```
pip install loutil
```

## Modules

- `loutil.numeric`: `range_of`, `range_from`, `range_with_steps`, `clamp`,
  `sum_of`, `sum_by`, `product`, `product_by`, `mean`, `mean_by`.
  For integer input, `mean` and `mean_by` give a mean truncated toward zero.
  For an empty collection, sums and means give 0 and products give 1.
- `loutil.transform`: `filter_by`, `map_items`, `uniq_map`, `filter_map`,
  `flat_map`, `reduce_left`, `reduce_right`, `for_each`, `for_each_while`,
  `times`, `uniq`, `uniq_by`, `group_by`, `group_by_map`, `chunk`,
  `partition_by`, `flatten`, `interleave`, `shuffled`, `reversed_copy`,
  `fill`, `repeat`, `repeat_by`.
- `loutil.selection`: `key_by`, `associate`, `slice_to_map`,
  `filter_slice_to_map`, `keyify`, `drop`, `drop_right`, `drop_while`,
  `drop_right_while`, `drop_by_index`, `reject`, `reject_map`,
  `filter_reject`, `count`, `count_by`, `count_values`, `count_values_by`,
  `subset`, `slice_range`, `replace`, `replace_all`, `compact`, `is_sorted`,
  `is_sorted_by_key`, `splice`.
- `loutil.text`: `random_string`, `substring`, `chunk_string`,
  `rune_length`, `words`, `capitalize`, `pascal_case`, `camel_case`,
  `kebab_case`, `snake_case`, `ellipsis`. The module also holds character
  sets for `random_string`, such as `LOWER_CASE_LETTERS_CHARSET`,
  `ALPHANUMERIC_CHARSET` and `ALL_CHARSET`.
- `loutil.mutable`: `shuffle`, `reverse` and `fill`, which change a list in
  place.
- `loutil.parallel`: `map_items`, `for_each`, `times`, `group_by` and
  `partition_by`. These run the callback on a thread pool and return
  results in input order.
- `loutil.timing`: `duration(callback)` returns the seconds a call took.
  `timed(callback)` returns `(result, seconds)`.
- `loutil.retry`: `attempt`, `attempt_with_delay`, `attempt_while`,
  `attempt_while_with_delay`, `StopAttempts`, `Debounce`, `DebounceBy`,
  `Throttle`, `ThrottleBy`, `Transaction`, `StepFailed`, `TransactionError`.

Invalid arguments raise `ValueError`. Examples are a chunk size of 0, a
negative count or length, or an empty charset.

## Examples

```python
from loutil.transform import chunk, uniq
from loutil.selection import drop_by_index
from loutil.text import snake_case, ellipsis
from loutil.numeric import range_with_steps

chunk([0, 1, 2, 3, 4, 5, 6], 2)       # [[0, 1], [2, 3], [4, 5], [6]]
uniq([1, 2, 2, 1])                    # [1, 2]
drop_by_index([0, 1, 2, 3, 4], -1)    # [0, 1, 2, 3]
snake_case("HTTPStatusCode")          # "http_status_code"
ellipsis(" hello   world ", 9)        # "hello..."
range_with_steps(0, 20, 6)            # [0, 6, 12, 18]
```

### Retrying

`attempt` calls the function with the attempt index until the function
stops raising, and returns the number of calls. A `max_iteration` below 1
retries without limit. If every attempt fails, the last exception is raised.

```python
from loutil.retry import attempt

def fetch(index):
    if index < 3:
        raise ConnectionError("not yet")

tries = attempt(5, fetch)   # 4
```

`attempt_with_delay` sleeps `delay` seconds between calls. It passes the
elapsed seconds to the function and returns `(calls, elapsed_seconds)`.

In `attempt_while` and `attempt_while_with_delay`, the function can stop
the retries early by raising `StopAttempts()`, which counts as success.
Raising `StopAttempts(error)` stops the retries and raises `error`.

### Debouncing and throttling

- `Debounce(after, *callbacks)` runs the callbacks once no new call has
  arrived for `after` seconds. `cancel()` stops it for good.
- `DebounceBy(after, *callbacks)` does the same for each key separately. It
  calls each callback as `callback(key, count)`, where `count` is the number
  of calls it folded into one.
- `Throttle(interval, *callbacks, count=1)` runs the callbacks at most
  `count` times per interval. `ThrottleBy` does the same for each key.
  Calling `reset()` starts a fresh interval.

The callbacks run on timer threads.

### Transactions

`process` runs the steps in order. When a step raises, the rollbacks of the
steps that completed run in reverse order. `process` then raises
`TransactionError`, whose `state` holds the rolled-back state and whose
`error` holds the original exception. A step can raise
`StepFailed(new_state)` to fail and still hand back an updated state.

```python
from loutil.retry import Transaction

tx = (
    Transaction()
    .then(lambda s: s + 100, lambda s: s - 100)
    .then(lambda s: s + 21, lambda s: s - 21)
)
tx.process(21)   # 142
```

## What it does not do

loutil is a library only. It has no command-line program.

## Running the tests

```
pip install -e ".[test]"
pytest
```