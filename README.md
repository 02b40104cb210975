# rhpsim

Building blocks for simulating data replication in highly partitioned mobile
ad hoc networks. In the scenario, nodes are split between *partition-bound*
nodes, which roam inside one cell of a grid, and *travellers*, which cross the
whole area and carry data between partitions.

The package covers these parts of such a simulation:

- **Simulation parameters** (`rhpsim.params`): parses and checks a command line
  of simulation options. The defaults describe the reference scenario: 160
  nodes, a 4×4 grid over 1000 m × 1000 m, DSDV routing, a 100 m radio range and
  two minutes of run time.
- **Simulation area** (`rhpsim.area`): a rectangular area. It can be divided
  into strips or into a grid of partitions, and it can draw random positions
  inside itself.
- **Data items** (`rhpsim.dataitem`): the opaque payload wrapper that nodes
  store and replicate. Identifiers increase automatically.
- **Data owners** (`rhpsim.owners`): picks at random which nodes start out
  owning data.
- **Small helpers** (`rhpsim.nsutil`): time spans in seconds and minutes, and
  parsing of the routing protocol and the random-walk mode from text.

It needs nothing outside the standard library.

## What it does not do

The package runs no simulation. It has no network, radio, routing or mobility
engine, no replication protocol, no statistics collection and no command-line
program. It provides the configuration, geometry, data and owner-selection
pieces that a simulation driver would use.

## Parameters

`parse_parameters(argv)` takes a list of arguments, without the program name,
and returns a frozen `SimulationParameters`. Options are written `--name=value`
or `--name value`. If the list is empty, every default is used. If `argv` is
`None`, the arguments come from `sys.argv`. A malformed option or an invalid
combination of values raises `ParameterError`, which is a subclass of
`ValueError`.

```python
from rhpsim.params import ParameterError, parse_parameters

params = parse_parameters([])              # all defaults
print(params.rows, params.cols)            # 4 4
print(params.traveller_nodes)              # 32
print(params.data_owners)                  # 16

try:
    parse_parameters(["--carryingThreshold=1.5"])
except ParameterError as error:
    print(error)   # Carrying threshold (1.5) is not a probability
```

The checks are:

- `carryingThreshold`, `forwardingThreshold`, `wcol`, `wcdc`,
  `lowPowerThreshold`, `storageWeight` and `energyWeight` must each lie in
  `[0, 1]`.
- `wcol + wcdc` must equal one.
- `processingWeight` must be 0.
- `storageWeight + energyWeight + processingWeight` must equal one.
- `travellerWalkMode` must be `distance` or `time`, in any case.
- `routing` must be `dsdv` or `aodv`, in any case.
- `partitionNodes × gridRows × gridCols` must not exceed `totalNodes`.
- `percentDataOwners` must lie in `[0, 100]`.

Some values are derived from the options:

- `traveller_nodes` is the number of nodes left over after every partition is
  filled.
- `data_owners` is `totalNodes × percentDataOwners / 100`, rounded half away
  from zero.
- If `travellerWalkDist` is 0, which is the default,
  `traveller_direction_change_distance` becomes the smaller of `areaWidth` and
  `areaLength`.
- `area` is a `SimulationArea` from `(0, 0)` to `(areaWidth, areaLength)`.

Options given in seconds become `datetime.timedelta` values: `runtime`,
`lookup_time`, `update_time`, `wait_time`, `election_cooldown` and the other
periods and timeouts. The routing protocol becomes a `RoutingType` and the
walk mode a `WalkMode`.

The switches are `--staggeredStart`, `--optionCarrierForwarding`,
`--optionalCheckBuffer` and `--optionalNoEmptyTransfers`. Each is false unless
it is given. Given alone, a switch is true. It also takes an explicit value:
`true`, `t`, `1` or `yes` for true, and `false`, `f`, `0` or `no` for false.

Integer options must fit their ranges:

- `hops` and `replicationHops` take 0 to 255.
- The node counts, sizes and grid dimensions take 0 to 2³² − 1.

`SimulationParameters.parse(argv)` does the same as `parse_parameters`.
`build_parser()` returns the underlying `argparse` parser, which lists every
option with its default and help text, and raises `ParameterError` instead of
exiting on a parse error.

## Areas and partitions

```python
import random

from rhpsim.area import SimulationArea

area = SimulationArea((0.0, 0.0), (1000.0, 1000.0))
print(area)                                # {(0,0),(1000,1000)}

for cell in area.split_into_grid(4, 4):
    print(cell.min_x, cell.min_y, cell.max_x, cell.max_y)

print(area.random_position(random.Random(7)))
```

`min_x`, `max_x`, `min_y`, `max_y`, `delta_x` and `delta_y` are properties.

The area methods are:

- `divide_horizontally(parts)` cuts the area into equal strips along x.
- `divide_vertically(parts)` cuts it into equal strips along y.
- `split_into_grid(x, y)` does both and lists the cells strip by strip.
- `as_rectangle()` returns `(x_min, x_max, y_min, y_max)`.
- `grid_origin()` returns `(min_x, min_y, delta_x, delta_y)`.
- `random_position(rng)` draws a uniformly distributed point from a
  `random.Random`.

## Data items

```python
from rhpsim.dataitem import DataItem

item = DataItem.create(512, 42, bytes(512))
print(item.data_id, item.owner, item.size) # 1 42 512  (first item created)

text = DataItem(12, 100, "this is a test payload")
print(text.size)                           # 22

empty = DataItem()
print(empty.data_id, empty.size, empty.payload)   # 0 0 None
```

`DataItem.create(size, owner, payload)` keeps the first `size` bytes of the
payload and gives each item the next identifier, starting from 1. It raises
`ValueError` if `size` is negative or the payload is shorter than `size`.
Items can also be built directly with an explicit identifier. String payloads
are stored as UTF-8 bytes. Items are immutable.

## Data owners

```python
import random

from rhpsim.owners import Role, assign_roles, select_data_owners

rng = random.Random(7)
owner_ids = select_data_owners(160, 16, rng)   # 16 distinct ids in 0..160
roles = assign_roles(160, 16, rng)             # one Role per node
```

`select_data_owners(node_count, owners, rng)` draws `owners` distinct ids from
`0` to `node_count`. Both ends are included, so an id may fall one past the
last node, and that id names no node. For that reason `assign_roles` can mark
fewer than `owners` nodes as `Role.OWNER`. Every other node is
`Role.CONSUMER_ONLY`. Negative counts, and asking for more owners than there
are ids, raise `ValueError`.

## Helpers

```python
from rhpsim.nsutil import (
    RoutingType, WalkMode, get_routing_type, get_walk_mode, minutes, seconds,
)

print(get_routing_type("AODV") is RoutingType.AODV)     # True
print(get_routing_type("olsr") is RoutingType.UNKNOWN)  # True
print(get_walk_mode("Time") is WalkMode.TIME)           # True
print(minutes(2) == seconds(120))                       # True
```

`get_walk_mode` raises `ValueError` for anything other than `distance` or
`time`.