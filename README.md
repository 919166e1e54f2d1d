# dsakit

A small library of classic data structures and algorithm exercises, written
in plain Python with no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `dsakit.arrays` | `running_sum`, `contains_duplicate`, `left_right_sum`, `highest_altitude` |
| `dsakit.sorting` | `merge_sort` (sorts a list in place), `quick_sort` (returns a new list) |
| `dsakit.matrix` | `max_wealth`, `diagonal_sum`, `max_ones_row` |
| `dsakit.recursion` | `count_down` (a generator of lines), `fib`, `fib_tab`, `is_prime`, `decimal_to_binary`, `factorial`, `gcd`, `sum_natural` |
| `dsakit.stacks` | `Stack`, `LinkedStack`, `BoundedStack` |
| `dsakit.stack_problems` | `is_valid_parentheses`, `reverse_string`, `binary_string`, `next_greater_elements`, `sort_stack`, `sort_stack_recursive`, `simplify_path`, `remove_duplicates`, `remove_stars`, `make_good` |
| `dsakit.queues` | `LinkedQueue`, `CircularQueue`, `QueueStack` |
| `dsakit.queue_problems` | `reverse_queue`, `generate_binary_numbers`, `is_palindrome`, `ZigzagIterator`, `max_sliding_window` |
| `dsakit.linked_list` | `ListNode`, `DLNode`, `from_values`, `doubly_from_values`, `to_values`, `SinglyLinkedList`, `DoublyLinkedList` |
| `dsakit.list_problems` | `reverse_list`, `delete_duplicates`, `merge_two_lists`, `is_palindrome`, `swap_pairs` |
| `dsakit.hash_table` | `Record`, `DirectHashTable`, `ChainedHashTable` |
| `dsakit.bst` | `BinarySearchTree` |
| `dsakit.tree_problems` | `TreeNode`, `in_order_values`, `max_depth`, `is_balanced`, `min_diff_in_bst`, `range_sum_bst`, `kth_smallest`, `closest_value`, `merge_trees` |
| `dsakit.hash_set_problems` | `count_elements`, `num_jewels_in_stones`, `unique_occurrences`, `length_of_longest_substring`, `length_of_longest_substring_window` |
| `dsakit.hash_problems` | `first_unique_char`, `largest_unique_number`, `max_number_of_balloons`, `longest_palindrome`, `can_construct` |
| `dsakit.heaps` | `insert_min_heap`, `heapify`, `insert_min_heap_heapify`, `remaining_gifts`, `frequency_sort`, `frequency_sort_bucket`, `connect_sticks`, `MedianFinder` |
| `dsakit.graph` | `Graph` (undirected, adjacency list) |
| `dsakit.graph_problems` | `AdjacencyGraph` (with `dfs` and `bfs`), `valid_path`, `find_provinces`, `find_smallest_set_of_vertices` |
| `dsakit.trie` | `Trie` (with `insert`, `search`, `starts_with`, `delete`, `suggestions`), `WordDictionary`, `index_pairs`, `suggested_products` |

## Examples

```python
from dsakit.sorting import merge_sort, quick_sort
from dsakit.stack_problems import simplify_path
from dsakit.heaps import MedianFinder
from dsakit.trie import Trie

items = [12, 11, 13, 5, 6, 7]
merge_sort(items)                        # sorts in place, returns None
items                                    # [5, 6, 7, 11, 12, 13]
quick_sort([3, 1, 2])                    # [1, 2, 3]

simplify_path("/a//b////c/d//././/..")  # "/a/b/c"

finder = MedianFinder()
for n in (3, 1, 5, 4):
    finder.insert(n)
finder.median()                          # 3.5

trie = Trie()
trie.insert("apple")
trie.search("apple")                     # True
trie.starts_with("app")                  # True
```

## Errors

Containers raise ordinary Python exceptions when used wrongly:

- Popping or peeking an empty `Stack`, `LinkedStack` or `BoundedStack`, or
  pushing onto a full `BoundedStack`, raises `IndexError`.
- Dequeuing from an empty `LinkedQueue` or `CircularQueue`, or enqueuing into a
  full `CircularQueue`, raises `IndexError`.
- `DirectHashTable.search` / `delete` and `ChainedHashTable.search` / `delete`
  raise `KeyError` for an absent key; `DirectHashTable.insert` raises
  `OverflowError` when the table is full, and `ChainedHashTable.insert` returns
  `False` for a key already present.
- `MedianFinder.median` raises `ValueError` before any number is inserted.

## What it does not do

`dsakit` is a library only. It has no command-line tool, does not read or
write files, and keeps every structure in memory for the life of the object.