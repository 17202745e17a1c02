# algosandbox

A small collection of classic data structures together with a few Linux
helpers for inspecting process namespaces and configuring network links.
It has no dependencies outside the standard library.

## Installation

```
pip install .
```

Install the test extra to run the test suite:

```
pip install .[test]
pytest
```

## Data structures

### Binary search tree

`algosandbox.bst.BST` is a binary search tree node. Smaller values go to
the left, equal or larger values go to the right.

```python
from algosandbox.bst import BST

tree = BST(5)
tree.insert_iteratively(BST(3))
tree.insert_recursively(BST(7))

[node.value for node in tree.traverse_inorder()]   # [3, 5, 7]
[node.value for node in tree.traverse_preorder()]  # [5, 3, 7]
tree.branch_vectors()                              # [[5, 3], [5, 7]]

tree.delete(5)
```

- `find(value)` returns the subtree rooted at `value`, or `None`.
- `inorder_successor(value)` returns a pair: the first node holding `value`
  and the node that follows it in order (either may be `None`).
- `delete(value)` removes the value, rebuilding the tree in place, and
  raises `ValueError` if the value is not in the tree.
- `is_leaf()` tells whether a node has no children.
- `branch_vectors()` lists the values along every root-to-leaf path.

### Doubly linked list

`algosandbox.linked_list` provides `LinkedListNode` and `build`, which links
a sequence of nodes together and returns the first one (or `None` for an
empty sequence). Any node can be used to reach the whole list: `head`,
`tail`, `is_head`, `is_tail`, `append`, `prepend`, `search`, `remove` and
`insert_after` all work from whichever node you hold. `search` looks forward
from the node first, then backward; `remove` and `insert_after` do nothing
when the value is not found.

```python
from algosandbox.linked_list import LinkedListNode, build

first = build([LinkedListNode(0), LinkedListNode(1), LinkedListNode(2)])
first.tail().value            # 2
first.insert_after(LinkedListNode(11), 1)
first.remove(2)
```

### M-ary tree

`algosandbox.m_ary_tree.MAryTree` holds a string value and any number of
children; `traverse()` returns the values in depth-first pre-order.

### Plain nodes

`algosandbox.nodes` defines the bare `ListNode` (`val`, `next`, `prev`) and
`TreeNode` (`val`, `left`, `right`) records. `ListNode` leaves `prev` out of
comparison and repr.

### Thread-safe buffer

`algosandbox.buffer.ThreadSafeBuffer` accumulates bytes from many threads;
`write` returns the number of bytes written and `str()` gives the contents
decoded as UTF-8.

## Linux helpers

These need Linux, a mounted `/proc`, and for the network helpers the `ip`
command from iproute2 (usually with root privileges).

### `algosandbox.procns`

- `mount_namespace_inode_number(pid)`, `network_namespace_inode_number(pid, tid)`
  and `pid_namespace_inode_number(pid, tid)` read namespace inode numbers
  from `/proc`.
- `parse_ns_id(prefix, link)` extracts the number from a link such as
  `net:[4026531840]`, raising `ValueError` if it is not an integer.
- `open_network_namespace(pid, tid)` opens a thread's network namespace file
  and returns the descriptor; the caller must close it.
- `grep_pids_in_host_and_child_ns(command)` runs `pgrep` and maps each host
  PID to the PID inside its namespace; a failing `pgrep` raises
  `subprocess.CalledProcessError`.
- `parent_pid_by_child_pid(process_name, child_pid)` returns the host PID
  for a PID inside a container, raising `PIDNotFoundError` when nothing
  matches.

### `algosandbox.ipnet`

- `ip_addr_list()` returns `IPAddr` records (each with a list of `AddrInfo`)
  parsed from `ip --json addr show`.
- `is_ip_addr_in_use(ip)` checks whether an address in CIDR form is assigned
  with that prefix length; malformed input raises `ValueError`.
- `interface_by_name(name)` returns an `Interface` (`index`, `name`) or
  raises `LookupError`.
- `setup_loopback_interface()` and `setup_veth(veth_name, veth_ip, peer_name,
  peer_ns_name)` bring links up and return their `Interface`.
- `setup_bridge(name, ip_addr)` creates the bridge if needed, enables it and
  assigns the address, raising `IPAddrAlreadyInUseError` if the address is
  already assigned.
- `remove_bridge`, `attach_device_to_bridge`, `add_ip_addr_to_interface`,
  `set_default_gateway`, `enable_device` and `delete_link` each run one `ip`
  command and return its output.

A command that cannot be run or exits with an error raises
`NetCommandError`, which carries `command`, `returncode` and `output`.

These helpers do not create network namespaces themselves; the namespace
named in `setup_veth` must already exist.

## Memory eater

A tiny command that grows a buffer by ten 10 MiB chunks, printing a line
after each one, handy for testing memory limits of containers and cgroups:

```
algosandbox-memory-eater
```

Each line reads `ate N MB`, where `N` is the buffer size in bytes divided
by 1024.