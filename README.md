# algosearch

Binary search over a sorted sequence.

`algosearch.binary.search(arr, k)` looks for `k` in `arr`, which must be a
sequence sorted in ascending order whose items can be compared with `k`
using `<`. It returns the index of an item that is neither less than nor
greater than `k`, or `None` if there is no such item.

```python
from algosearch.binary import search

xs = [1, 2, 3, 4, 5, 6, 7, 8]

search(xs, 1)    # 0
search(xs, 4)    # 3
search(xs, 8)    # 7
search(xs, 100)  # None
search([], 0)    # None
```

When equal items occur more than once, the index returned is the one that
the search reaches first, which is not always the first or the last of them.
The sequence is not checked for order: on unsorted input the result is
undefined.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```