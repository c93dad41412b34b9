import math

import pytest

from oilpool.leaf import Leaf, LeafConfig, LeafSimulation, Vine


def make_vine():
    return Vine((100.0, 100.0), (200.0, 100.0))


def distance_point_to_segment(point, start, end):
    dx = end[0] - start[0]
    dy = end[1] - start[1]
    length_sq = dx * dx + dy * dy
    if length_sq == 0.0:
        return math.hypot(point[0] - start[0], point[1] - start[1])
    t = ((point[0] - start[0]) * dx + (point[1] - start[1]) * dy) / length_sq
    t = max(0.0, min(1.0, t))
    return math.hypot(point[0] - (start[0] + t * dx), point[1] - (start[1] + t * dy))


def test_initialization():
    sim = LeafSimulation()
    assert len(sim.leaves) == 0
    assert len(sim.vines) == 0
    assert sim.name == "leaf"
    assert sim.is_active()


def test_add_vine():
    sim = LeafSimulation()
    sim.add_vine(make_vine())
    assert len(sim.vines) == 1


def test_add_multiple_vines():
    sim = LeafSimulation()
    sim.add_vine(make_vine())
    sim.add_vine_line((0.0, 0.0), (100.0, 100.0))
    assert len(sim.vines) == 2
    assert sim.vines[1] == Vine((0.0, 0.0), (100.0, 100.0))


def test_clear_vines():
    sim = LeafSimulation()
    sim.add_vine(make_vine())
    sim.add_vine(make_vine())
    assert len(sim.vines) == 2
    sim.clear_vines()
    assert len(sim.vines) == 0


def test_vine_point_at():
    vine = Vine((0.0, 0.0), (100.0, 0.0))
    assert vine.point_at(0.0) == (0.0, 0.0)
    assert vine.point_at(0.5) == (50.0, 0.0)
    assert vine.point_at(1.0) == (100.0, 0.0)


def test_vine_perpendicular():
    perp = Vine((0.0, 0.0), (100.0, 0.0)).perpendicular()
    assert abs(perp[0]) < 0.001
    assert abs(perp[1] - 1.0) < 0.001 or abs(perp[1] + 1.0) < 0.001


def test_vine_direction_angle():
    assert abs(Vine((0.0, 0.0), (100.0, 0.0)).direction_angle()) < 0.001
    angle = Vine((0.0, 0.0), (0.0, 100.0)).direction_angle()
    assert abs(angle - math.pi / 2) < 0.001


def test_zero_length_vine():
    vine = Vine((50.0, 50.0), (50.0, 50.0))
    assert vine.perpendicular() == (0.0, 1.0)
    assert vine.length() == 0.0


def test_spawning_over_time():
    sim = LeafSimulation()
    sim.add_vine(make_vine())
    for _ in range(300):
        sim.tick(1.0 / 60.0)
    assert 8 <= len(sim.leaves) <= 12


def test_growth_progression():
    sim = LeafSimulation(LeafConfig(spawn_rate=100.0, growth_rate=1.0))
    sim.add_vine(make_vine())
    sim.tick(0.1)
    assert sim.leaves
    initial = sim.leaves[0].growth
    for _ in range(30):
        sim.tick(1.0 / 60.0)
    after = sim.leaves[0].growth
    assert after > initial
    assert 0.4 <= after <= 0.6


def test_growth_clamps_at_one():
    sim = LeafSimulation(LeafConfig(spawn_rate=1.0, growth_rate=1.0))
    sim.add_vine(make_vine())
    sim.tick(0.1)
    for _ in range(120):
        sim.tick(1.0 / 60.0)
    assert sim.leaves[0].growth == 1.0


def test_max_leaves_cap():
    sim = LeafSimulation()
    sim.set_max_leaves(10)
    sim.add_vine(make_vine())
    sim.config.spawn_rate = 100.0
    for _ in range(100):
        sim.tick(0.1)
    assert len(sim.leaves) == 10


def test_no_spawning_without_vines():
    sim = LeafSimulation()
    for _ in range(100):
        sim.tick(0.1)
    assert len(sim.leaves) == 0


def test_inactive_no_growth_or_spawn():
    sim = LeafSimulation()
    sim.add_vine(make_vine())
    sim.set_active(False)
    for _ in range(100):
        sim.tick(0.1)
    assert len(sim.leaves) == 0


def test_set_active():
    sim = LeafSimulation()
    assert sim.is_active()
    sim.set_active(False)
    assert not sim.is_active()
    sim.set_active(True)
    assert sim.is_active()


def test_reset_clears_leaves_keeps_vines():
    sim = LeafSimulation()
    sim.add_vine(make_vine())
    sim.config.spawn_rate = 10.0
    sim.tick(1.0)
    assert sim.leaves
    sim.reset()
    assert len(sim.leaves) == 0
    assert len(sim.vines) == 1


def test_determinism_same_seed():
    config = LeafConfig(noise_seed=12345, spawn_rate=5.0)
    sim1 = LeafSimulation(LeafConfig(**vars(config)))
    sim2 = LeafSimulation(LeafConfig(**vars(config)))
    sim1.add_vine(make_vine())
    sim2.add_vine(make_vine())
    for _ in range(60):
        sim1.tick(1.0 / 60.0)
        sim2.tick(1.0 / 60.0)
    assert len(sim1.leaves) == len(sim2.leaves)
    for l1, l2 in zip(sim1.leaves, sim2.leaves):
        assert abs(l1.position[0] - l2.position[0]) < 0.001
        assert abs(l1.position[1] - l2.position[1]) < 0.001


def test_different_seeds_different_results():
    sim1 = LeafSimulation(LeafConfig(noise_seed=111, spawn_rate=5.0))
    sim2 = LeafSimulation(LeafConfig(noise_seed=222, spawn_rate=5.0))
    sim1.add_vine(make_vine())
    sim2.add_vine(make_vine())
    for _ in range(60):
        sim1.tick(1.0 / 60.0)
        sim2.tick(1.0 / 60.0)
    assert any(
        abs(l1.position[0] - l2.position[0]) > 0.001
        for l1, l2 in zip(sim1.leaves, sim2.leaves)
    ), "Different seeds should produce different results"


def test_leaf_properties_in_range():
    sim = LeafSimulation()
    sim.add_vine(make_vine())
    sim.config.spawn_rate = 10.0
    sim.tick(1.0)
    assert sim.leaves
    for leaf in sim.leaves:
        assert leaf.size > 0.0
        assert 0.5 <= leaf.aspect <= 0.7
        assert leaf.growth == 0.0
        assert leaf.color_variant < 4


def test_zero_delta_time_no_change():
    sim = LeafSimulation()
    sim.add_vine(make_vine())
    sim.tick(0.0)
    assert len(sim.leaves) == 0


def test_weighted_vine_selection():
    sim = LeafSimulation()
    sim.add_vine_line((0.0, 0.0), (1000.0, 0.0))
    sim.add_vine_line((0.0, 0.0), (1.0, 0.0))
    sim.config.spawn_rate = 100.0
    sim.tick(1.0)
    on_long = sum(1 for leaf in sim.leaves if leaf.position[0] > 10.0)
    assert on_long / len(sim.leaves) > 0.9


def test_leaves_near_vines():
    sim = LeafSimulation(LeafConfig(spawn_rate=10.0, max_offset=0.2))
    sim.add_vine_line((-1.5, -0.5), (1.5, -0.5))
    sim.add_vine_line((-0.5, -1.5), (-0.5, 1.5))
    sim.tick(1.0)
    assert sim.leaves, "Should have spawned leaves"
    for leaf in sim.leaves:
        nearest = min(
            distance_point_to_segment(leaf.position, v.start, v.end) for v in sim.vines
        )
        assert nearest <= sim.config.max_offset * 1.1


def test_size_within_variation():
    config = LeafConfig(spawn_rate=50.0)
    sim = LeafSimulation(config)
    sim.add_vine(make_vine())
    sim.tick(1.0)
    low = config.base_size * (1.0 - config.size_variation)
    high = config.base_size * (1.0 + config.size_variation)
    assert sim.leaves
    for leaf in sim.leaves:
        assert low <= leaf.size <= high


def test_rotation_near_vine_direction():
    sim = LeafSimulation(LeafConfig(spawn_rate=50.0))
    sim.add_vine_line((0.0, 0.0), (0.0, 10.0))
    sim.tick(1.0)
    assert sim.leaves
    for leaf in sim.leaves:
        assert abs(leaf.rotation - math.pi / 2) <= 0.65


def test_leaf_is_mutable_record():
    leaf = Leaf(position=(1.0, 2.0), size=3.0, aspect=0.6, rotation=0.0, growth=0.0, color_variant=1)
    leaf.growth = 0.5
    assert leaf.growth == 0.5
    assert leaf.position == (1.0, 2.0)


def test_default_config_values():
    config = LeafConfig()
    assert config.spawn_rate == 2.0
    assert config.growth_rate == 2.5
    assert config.base_size == 18.0
    assert config.size_variation == pytest.approx(0.3)
    assert config.max_offset == pytest.approx(0.05)
    assert config.noise_seed == 42


def test_default_max_leaves_and_update():
    sim = LeafSimulation()
    assert sim.max_leaves == 500
    sim.set_max_leaves(3)
    assert sim.max_leaves == 3