# kernelbench

Small, self-contained Python versions of classic benchmark kernels, plus
simulated versions of the small programs used to exercise a bare-metal
debugger. The package needs only the standard library.

## Install

```
pip install .
pip install ".[test]"   # with the test tools
```

## Benchmark kernels

```python
from kernelbench.rsort import radix_sort
from kernelbench.vvadd import vvadd
from kernelbench.towers import Towers, TowersError

radix_sort([3, 1, 2])        # [1, 2, 3]
radix_sort([3, 1, 2], 4)     # same result, 4-bit digits instead of 8
vvadd([1, 2], [10, 20])      # [11, 22]

towers = Towers(7)
towers.solve()
towers.verify()              # True
```

- `kernelbench.rsort.radix_sort(values, log_base=8)` is a stable
  least-significant-digit radix sort over unsigned 32-bit words. Values
  outside `0 .. 2**32 - 1` raise `ValueError`; values that are not integers
  raise `TypeError`. A `log_base` below 1 raises `ValueError`.
- `kernelbench.vvadd.vvadd(a, b)` returns the element-wise sum and raises
  `ValueError` if the vectors differ in length.
- `kernelbench.towers.Towers(num_discs=7)` holds three pegs (`peg_a`,
  `peg_b`, `peg_c`) and a move counter `num_moves`. `solve()` moves the
  stack recursively from the first peg to the third, `clear()` puts it back,
  and `verify()` returns `True` or raises `TowersError`, whose `code`
  (2 to 6) says which check failed.

`kernelbench.vvadd_data` holds the reference inputs and expected sums for
the vector add: `small_dataset()` (300 elements) and `large_dataset()`
(1000 elements, whose first 300 are the small set). Each returns a frozen
`VvaddDataset` with `input1`, `input2` and `verify` tuples and a
`check(result)` method:

```python
from kernelbench.vvadd import vvadd
from kernelbench.vvadd_data import large_dataset

data = large_dataset()
data.check(vvadd(data.input1, data.input2))   # True
```

## Debug programs

- `kernelbench.checksum`: `reverse_bits(x)` reverses the bits of a 32-bit
  word, and `crc32a(message)` computes the standard reflected CRC-32 one bit
  at a time (`crc32a(b"123456789") == 0xCBF43926`).
- `kernelbench.debug`: `fib(n)` (Fibonacci modulo `2**32`), `rot13(text)`,
  `counting_loop(limit=10)` (returns the final counter and the running sum,
  `(10, 55)` by default) and `double_rot13_checksum(text)`, the XOR of the
  CRC-32 of the ROT13 text and of the text rotated back.
- `kernelbench.traps`: a machine `Timer` with a shared `mtime` and one
  `mtimecmp` per hart, a `TrapDispatcher` that routes each trap to the
  handler installed for its hart (raising `UnhandledTrap` when there is
  none), and `InterruptCounter`, a handler that counts timer interrupts and
  re-arms the timer `delta` cycles ahead.

```python
from kernelbench.traps import InterruptCounter, Timer, TrapDispatcher

timer = Timer(num_harts=1)
counter = InterruptCounter(timer, delta=0x100)
dispatcher = TrapDispatcher(num_harts=1)
dispatcher.set_trap_handler(0, counter)

timer.mtimecmp[0] = 0
timer.tick(5)
if timer.pending(0):
    resume_at = dispatcher.handle_trap(0, 7, 0x1000, 0x2000)   # 0x1000
counter.count        # 1
timer.mtimecmp[0]    # 5 + 0x100
```

## What it does not do

There is no command-line tool and no benchmark runner or timing harness:
the kernels are plain functions and classes called from Python. Only the
kernels and simulations listed above are included.

## Tests

```
pytest
```