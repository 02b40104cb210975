"""Simulation parameters read from the command line, with their defaults and checks."""

from __future__ import annotations

import argparse
import math
from dataclasses import dataclass
from datetime import timedelta
from typing import Callable, NoReturn, Sequence

from .area import SimulationArea
from .nsutil import RoutingType, WalkMode, get_routing_type, get_walk_mode, minutes, seconds

__all__ = ["ParameterError", "SimulationParameters", "build_parser", "parse_parameters"]


class ParameterError(ValueError):
    """The command line does not describe a simulation that can run."""


class _Parser(argparse.ArgumentParser):
    def error(self, message: str) -> NoReturn:
        raise ParameterError(message)


def _unsigned(bits: int) -> Callable[[str], int]:
    limit = 1 << bits

    def convert(text: str) -> int:
        value = int(text, 10)
        if not 0 <= value < limit:
            raise ValueError(f"{value} does not fit in {bits} unsigned bits")
        return value

    convert.__name__ = f"uint{bits}"
    return convert


_uint8 = _unsigned(8)
_uint32 = _unsigned(32)

_TRUE = {"true", "t", "1", "yes"}
_FALSE = {"false", "f", "0", "no"}


def _boolean(text: str) -> bool:
    lowered = text.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise ValueError(f"not a boolean: {text!r}")


_boolean.__name__ = "bool"


def _is_equal(a: float, b: float) -> bool:
    return math.isclose(a, b, rel_tol=1e-9, abs_tol=1e-9)


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


# (option, destination, type, default, help)
_OPTIONS: tuple[tuple[str, str, Callable[[str], object], object, str], ...] = (
    ("runTime", "runtime", float, minutes(2).total_seconds(), "Simulation run time in seconds"),
    ("totalNodes", "total_nodes", _uint32, 160, "Total number of nodes in the simulation"),
    (
        "percentDataOwners",
        "percent_data_owners",
        float,
        10.0,
        "Percent of nodes who have original data to deciminate",
    ),
    (
        "lowPowerThreshold",
        "low_power_threshold",
        float,
        0.0,
        "The battery precentage at which a node will step down as a replication node "
        "if it drops below this point",
    ),
    (
        "lookupTime",
        "lookup_time",
        float,
        30.0,
        "number of seconds to used to generate the delay between data lookup",
    ),
    (
        "updateTime",
        "update_time",
        float,
        120.0,
        "number of seconds to used to generate the delay between data updates",
    ),
    (
        "storageSpace",
        "storage_space",
        _uint32,
        160,
        "The number of data items that can be stored in the devices storage space",
    ),
    (
        "bufferSpace",
        "buffer_space",
        _uint32,
        10,
        "The number of data items that can be stored in the devices FCFS buffer space",
    ),
    (
        "waitTime",
        "wait_time",
        float,
        30.0,
        "number of seconds to wait before starting the data access application",
    ),
    ("dataSize", "data_size", _uint32, 512, "The number of bytes that make up a data object"),
    ("partitionNodes", "nodes_per_partition", _uint32, 8, "The number of nodes placed per partition"),
    (
        "carryingThreshold",
        "carrying_threshold",
        float,
        0.6,
        "The delivery probability threshold for a node to cache data",
    ),
    (
        "forwardingThreshold",
        "forwarding_threshold",
        float,
        0.4,
        "The delivery probability threshold for a node to forward data",
    ),
    (
        "hops",
        "neighborhood_size",
        _uint8,
        2,
        "The number of hops to consider in the neighborhood of a node",
    ),
    (
        "replicationHops",
        "election_neighborhood_size",
        _uint8,
        4,
        "The number of hops to consider in the neighborhood of a node for replicating "
        "node elections",
    ),
    (
        "wcdc",
        "wcdc",
        float,
        0.5,
        "Weight of degree connectivity in delivery probability calculations (range [0, 1])",
    ),
    (
        "wcol",
        "wcol",
        float,
        0.5,
        "Weight of colocation in delivery probability calculations (range [0, 1])",
    ),
    (
        "profileUpdateDelay",
        "profile_update_delay",
        float,
        6.0,
        "Number of seconds between profile updates",
    ),
    ("areaWidth", "area_width", float, 1000.0, "Width of the simulation area in meters"),
    ("areaLength", "area_length", float, 1000.0, "Length of the simulation area in meters"),
    ("gridRows", "rows", _uint32, 4, "Number of rows in the partition grid"),
    ("gridCols", "cols", _uint32, 4, "Number of columns in the partition grid"),
    ("travellerVelocity", "traveller_velocity", float, 20.0, "Velocity of traveller nodes in m/s"),
    (
        "travellerWalkDist",
        "traveller_walk_distance",
        float,
        0.0,
        "The distance in meters that traveller walks before changing directions",
    ),
    (
        "travellerWalkTime",
        "traveller_walk_time",
        float,
        30.0,
        "The time in seconds that should pass before a traveller changes directions",
    ),
    (
        "travellerWalkMode",
        "traveller_walk_mode",
        str,
        "distance",
        "Should a traveller change direction after distance walked or time passed; "
        "options are 'distance' or 'time' ",
    ),
    (
        "pbnVelocityMin",
        "pbn_velocity_min",
        float,
        1.0,
        "Minimum velocity of partition-bound-nodes in m/s",
    ),
    (
        "pbnVelocityMax",
        "pbn_velocity_max",
        float,
        10.0,
        "Maximum velocity of partition-bound-nodes in m/s",
    ),
    (
        "pbnVelocityChangeAfter",
        "pbn_velocity_change_after",
        float,
        100.0,
        "Number of seconds after which each partition-bound node should change velocity",
    ),
    (
        "electionCooldown",
        "election_cooldown",
        float,
        6.0,
        "The number of seconds to wait before another election can be triggered",
    ),
    (
        "electionPeriod",
        "election_period",
        float,
        6.0,
        "The number of seconds to wait before checking the results of an election",
    ),
    (
        "peerTimeout",
        "peer_timeout",
        float,
        12.0,
        "The number of seconds to wait before removing a node from the list of peers or "
        "removing it as a replication node",
    ),
    (
        "requestTimeout",
        "request_timeout",
        float,
        0.0,
        "The number of seconds to wait before marking a lookup as failed, "
        "(0 means that there is no timeout)",
    ),
    (
        "storageWeight",
        "storage_weight",
        float,
        0.5,
        "The available storage space weight used for the election fitness calculation "
        "(range [0, 1])",
    ),
    (
        "energyWeight",
        "energy_weight",
        float,
        0.5,
        "The available energy level weight used for the election fitness calculation "
        "(range [0, 1])",
    ),
    (
        "processingWeight",
        "processing_weight",
        float,
        0.0,
        "The available processing power weight used for the election fitness calculation "
        "(CURRENTLY THIS MUST BE 0 )",
    ),
    ("routing", "routing", str, "dsdv", "One of either 'DSDV' or 'AODV'"),
    ("wifiRadius", "wifi_radius", float, 100.0, "The radius of connectivity for each node in meters"),
)

_FLAGS: tuple[tuple[str, str, str], ...] = (
    (
        "staggeredStart",
        "staggered_start",
        "If the application starting should be staggered across the different nodes",
    ),
    (
        "optionCarrierForwarding",
        "option_carrier_forwarding",
        "to enable the optional carrier forwarding",
    ),
    (
        "optionalCheckBuffer",
        "optional_check_buffer",
        "to enable the optional checking the data items in the buffer when doing a lookup",
    ),
    (
        "optionalNoEmptyTransfers",
        "optional_no_empty_transfers",
        "to enable not sending unnecessary messages, ie. dont send transfer if there are no items",
    ),
)

_ANIMATION_TRACE_FILE = "rhpman.xml"


def build_parser() -> argparse.ArgumentParser:
    """Return the command-line parser for every simulation option, with defaults.

    Parse errors raise ``ParameterError`` rather than exiting.
    """
    parser = _Parser(
        prog="rhpsim",
        description="Parameters for a replication simulation in a partitioned ad hoc network.",
        allow_abbrev=False,
    )
    for option, dest, kind, default, text in _OPTIONS:
        parser.add_argument(f"--{option}", dest=dest, type=kind, default=default, help=text)
    for option, dest, text in _FLAGS:
        parser.add_argument(
            f"--{option}",
            dest=dest,
            type=_boolean,
            nargs="?",
            const=True,
            default=False,
            help=text,
        )
    return parser


def _check_probability(value: float, what: str, kind: str = "probability") -> None:
    if value < 0 or value > 1:
        raise ParameterError(f"{what} ({value:g}) is not a {kind}")


@dataclass(frozen=True)
class SimulationParameters:
    """Every setting a simulation run needs, checked and with derived values filled in."""

    runtime: timedelta
    total_nodes: int
    nodes_per_partition: int
    traveller_nodes: int
    data_owners: int
    carrying_threshold: float
    forwarding_threshold: float
    wcdc: float
    wcol: float
    profile_update_delay: timedelta
    neighborhood_size: int
    election_neighborhood_size: int
    area: SimulationArea
    rows: int
    cols: int
    traveller_velocity: float
    traveller_direction_change_period: timedelta
    update_time: timedelta
    lookup_time: timedelta
    wait_time: timedelta
    data_size: int
    election_cooldown: timedelta
    election_period: timedelta
    peer_timeout: timedelta
    request_timeout: timedelta
    storage_weight: float
    energy_weight: float
    processing_weight: float
    staggered_start: bool
    option_carrier_forwarding: bool
    optional_check_buffer: bool
    optional_no_empty_transfers: bool
    low_power_threshold: float
    storage_space: int
    buffer_space: int
    traveller_direction_change_distance: float
    traveller_walk_mode: WalkMode
    pbn_velocity_min: float
    pbn_velocity_max: float
    pbn_velocity_change_period: timedelta
    routing_protocol: RoutingType
    wifi_radius: float
    netanim_trace_file_path: str

    @classmethod
    def parse(cls, argv: Sequence[str] | None = None) -> "SimulationParameters":
        """Parse command-line options (without the program name).

        Raises ``ParameterError`` when an option is malformed or the values
        do not describe a runnable simulation.
        """
        ns = build_parser().parse_args(None if argv is None else list(argv))

        _check_probability(ns.carrying_threshold, "Carrying threshold")
        _check_probability(ns.forwarding_threshold, "Forwarding threshold")
        _check_probability(ns.wcol, "Colocation weight")
        _check_probability(ns.wcdc, "Degree connectivity weight")
        if not _is_equal(ns.wcol + ns.wcdc, 1):
            raise ParameterError("colocation and connectivity weights must sum to one")
        _check_probability(ns.low_power_threshold, "Low power threshold", "percentage")
        _check_probability(ns.storage_weight, "Storage space weight")
        _check_probability(ns.energy_weight, "Energy level weight")
        if ns.processing_weight != 0:
            raise ParameterError(
                f"Processing power weight ({ns.processing_weight:g}) is not a probability"
            )
        if not _is_equal(ns.storage_weight + ns.energy_weight + ns.processing_weight, 1):
            raise ParameterError("Fitness weights must sum to one")

        try:
            walk_mode = get_walk_mode(ns.traveller_walk_mode)
        except ValueError:
            raise ParameterError(
                f"Unrecognized walk mode '{ns.traveller_walk_mode}'."
            ) from None

        walk_distance = ns.traveller_walk_distance
        if not walk_distance:
            walk_distance = min(ns.area_width, ns.area_length)

        routing = get_routing_type(ns.routing)
        if routing is RoutingType.UNKNOWN:
            raise ParameterError(f"Unrecognized routing type '{ns.routing}'.")

        partitions = ns.rows * ns.cols
        if ns.nodes_per_partition * partitions > ns.total_nodes:
            raise ParameterError(
                f"Too few nodes ({ns.total_nodes}) to populate all {partitions} "
                f"partitions with {ns.nodes_per_partition} nodes."
            )

        if ns.percent_data_owners < 0.0 or ns.percent_data_owners > 100.0:
            raise ParameterError(
                f"percentage of data owners ({ns.percent_data_owners:g}%) is out of range"
            )

        return cls(
            runtime=seconds(ns.runtime),
            total_nodes=ns.total_nodes,
            nodes_per_partition=ns.nodes_per_partition,
            traveller_nodes=ns.total_nodes - ns.nodes_per_partition * partitions,
            data_owners=_round_half_away(ns.total_nodes * (ns.percent_data_owners / 100.0)),
            carrying_threshold=ns.carrying_threshold,
            forwarding_threshold=ns.forwarding_threshold,
            wcdc=ns.wcdc,
            wcol=ns.wcol,
            profile_update_delay=seconds(ns.profile_update_delay),
            neighborhood_size=ns.neighborhood_size,
            election_neighborhood_size=ns.election_neighborhood_size,
            area=SimulationArea((0.0, 0.0), (ns.area_width, ns.area_length)),
            rows=ns.rows,
            cols=ns.cols,
            traveller_velocity=ns.traveller_velocity,
            traveller_direction_change_period=seconds(ns.traveller_walk_time),
            update_time=seconds(ns.update_time),
            lookup_time=seconds(ns.lookup_time),
            wait_time=seconds(ns.wait_time),
            data_size=ns.data_size,
            election_cooldown=seconds(ns.election_cooldown),
            election_period=seconds(ns.election_period),
            peer_timeout=seconds(ns.peer_timeout),
            request_timeout=seconds(ns.request_timeout),
            storage_weight=ns.storage_weight,
            energy_weight=ns.energy_weight,
            processing_weight=ns.processing_weight,
            staggered_start=ns.staggered_start,
            option_carrier_forwarding=ns.option_carrier_forwarding,
            optional_check_buffer=ns.optional_check_buffer,
            optional_no_empty_transfers=ns.optional_no_empty_transfers,
            low_power_threshold=ns.low_power_threshold,
            storage_space=ns.storage_space,
            buffer_space=ns.buffer_space,
            traveller_direction_change_distance=walk_distance,
            traveller_walk_mode=walk_mode,
            pbn_velocity_min=ns.pbn_velocity_min,
            pbn_velocity_max=ns.pbn_velocity_max,
            pbn_velocity_change_period=seconds(ns.pbn_velocity_change_after),
            routing_protocol=routing,
            wifi_radius=ns.wifi_radius,
            netanim_trace_file_path=_ANIMATION_TRACE_FILE,
        )


def parse_parameters(argv: Sequence[str] | None = None) -> SimulationParameters:
    """Parse command-line options into checked simulation parameters."""
    return SimulationParameters.parse(argv)