import pytest

from rhpsim.area import SimulationArea
from rhpsim.nsutil import RoutingType, WalkMode, minutes, seconds
from rhpsim.params import (
    ParameterError,
    SimulationParameters,
    build_parser,
    parse_parameters,
)


def test_defaults():
    params = SimulationParameters.parse([])
    assert params.runtime == minutes(2)
    assert params.total_nodes == 160
    assert params.nodes_per_partition == 8
    assert params.rows == 4
    assert params.cols == 4
    assert params.data_size == 512
    assert params.storage_space == 160
    assert params.buffer_space == 10
    assert params.routing_protocol is RoutingType.DSDV
    assert params.traveller_walk_mode is WalkMode.DISTANCE
    assert params.wait_time == seconds(30)
    assert params.update_time == seconds(120)
    assert params.request_timeout == seconds(0)
    assert params.netanim_trace_file_path == "rhpman.xml"
    assert params.area == SimulationArea((0.0, 0.0), (1000.0, 1000.0))
    assert params.staggered_start is False
    assert params.optional_no_empty_transfers is False


def test_traveller_nodes_invariant():
    params = parse_parameters(["--gridRows=2", "--gridCols=3", "--partitionNodes=5"])
    assert params.traveller_nodes == (
        params.total_nodes - params.nodes_per_partition * params.rows * params.cols
    )
    assert params.rows == 2
    assert params.cols == 3


def test_walk_distance_defaults_to_shorter_side():
    params = parse_parameters(["--areaWidth=500", "--areaLength=800"])
    assert params.traveller_direction_change_distance == 500.0
    assert params.area.max_x == 500.0
    assert params.area.max_y == 800.0


def test_explicit_walk_distance_kept():
    params = parse_parameters(["--travellerWalkDist=42"])
    assert params.traveller_direction_change_distance == 42.0


@pytest.mark.parametrize("percent, expected_all", [("0", False), ("100", True)])
def test_data_owner_extremes(percent, expected_all):
    params = parse_parameters([f"--percentDataOwners={percent}"])
    assert params.data_owners == (params.total_nodes if expected_all else 0)


def test_data_owners_round_half_away_from_zero():
    params = parse_parameters(["--totalNodes=130", "--percentDataOwners=25"])
    assert params.data_owners == 33


def test_walk_mode_and_routing_case_insensitive():
    params = parse_parameters(["--travellerWalkMode=TIME", "--routing", "AODV"])
    assert params.traveller_walk_mode is WalkMode.TIME
    assert params.routing_protocol is RoutingType.AODV


def test_times_are_seconds():
    params = parse_parameters(["--runTime", "60", "--peerTimeout=3.5"])
    assert params.runtime == seconds(60)
    assert params.peer_timeout == seconds(3.5)


def test_flag_forms():
    params = parse_parameters(["--staggeredStart", "--optionalCheckBuffer=false"])
    assert params.staggered_start is True
    assert params.optional_check_buffer is False
    params = parse_parameters(["--optionCarrierForwarding=true"])
    assert params.option_carrier_forwarding is True


def test_weights_that_sum_to_one_are_accepted():
    params = parse_parameters(
        ["--wcol=0.3", "--wcdc=0.7", "--storageWeight=1", "--energyWeight=0"]
    )
    assert params.wcol == 0.3
    assert params.wcdc == 0.7
    assert params.storage_weight == 1.0
    assert params.energy_weight == 0.0


def test_velocities():
    params = parse_parameters(
        ["--travellerVelocity=5", "--pbnVelocityMin=2", "--pbnVelocityMax=3"]
    )
    assert params.traveller_velocity == 5.0
    assert (params.pbn_velocity_min, params.pbn_velocity_max) == (2.0, 3.0)


@pytest.mark.parametrize(
    "argv",
    [
        ["--carryingThreshold=1.5"],
        ["--forwardingThreshold=-0.1"],
        ["--wcol=2"],
        ["--wcdc=-1"],
        ["--wcol=0.3"],
        ["--lowPowerThreshold=1.5"],
        ["--storageWeight=1.5"],
        ["--energyWeight=-0.5"],
        ["--processingWeight=0.1"],
        ["--storageWeight=0.3"],
        ["--travellerWalkMode=run"],
        ["--routing=olsr"],
        ["--totalNodes=100"],
        ["--percentDataOwners=101"],
        ["--percentDataOwners=-1"],
        ["--hops=300"],
        ["--totalNodes=-1"],
        ["--totalNodes=abc"],
        ["--staggeredStart=maybe"],
        ["--bogus=1"],
    ],
)
def test_invalid_parameters(argv):
    with pytest.raises(ParameterError):
        parse_parameters(argv)


def test_parameter_error_is_value_error():
    with pytest.raises(ValueError, match="not a probability"):
        parse_parameters(["--carryingThreshold=2"])


def test_build_parser_defaults_and_dests():
    ns = build_parser().parse_args(["--gridRows=2"])
    assert ns.rows == 2
    assert ns.cols == 4
    assert ns.routing == "dsdv"


def test_parse_parameters_matches_classmethod():
    argv = ["--totalNodes=200", "--wifiRadius=50"]
    assert parse_parameters(argv) == SimulationParameters.parse(argv)
    assert parse_parameters(argv).wifi_radius == 50.0