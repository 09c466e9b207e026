import dataclasses

import pytest

from flocksim.params import MAX_GROUPS, BoidParams, GroupParams


def _params(**overrides):
    values = dict(
        protected_range_sq=0.025 ** 2,
        visual_range_sq=65.0 ** 2,
        centering_factor=0.005,
        matching_factor=0.015,
        avoid_factor=0.07,
        min_speed=15.0,
        max_speed=22.5,
        margin=0.5,
        bias_increment=0.01,
    )
    values.update(overrides)
    return BoidParams(**values)


def test_group_params_defaults_are_zero():
    group = GroupParams()
    assert group.direction == (0.0, 0.0, 0.0)
    assert group.bias_val == 0.0


def test_group_params_normalises_direction_to_float_tuple():
    group = GroupParams([1, 2, 3], 1)
    assert group.direction == (1.0, 2.0, 3.0)
    assert isinstance(group.bias_val, float) and group.bias_val == 1.0


def test_group_params_rejects_wrong_length():
    with pytest.raises(ValueError):
        GroupParams((1.0, 2.0), 0.0)


def test_group_params_is_mutable():
    group = GroupParams()
    group.bias_val = 0.02
    assert group.bias_val == 0.02


def test_boid_params_keeps_values():
    params = _params()
    assert params.min_speed == 15.0
    assert params.max_speed == 22.5
    assert params.visual_range_sq == 65.0 ** 2


def test_boid_params_is_frozen():
    params = _params()
    with pytest.raises(dataclasses.FrozenInstanceError):
        params.margin = 1.0
    assert params.margin == 0.5


def test_boid_params_replace_changes_one_field():
    params = _params()
    changed = dataclasses.replace(params, avoid_factor=0.5)
    assert changed.avoid_factor == 0.5
    assert changed.centering_factor == params.centering_factor


def test_max_groups_gives_group_slots():
    groups = [GroupParams() for _ in range(MAX_GROUPS)]
    assert len(groups) == 4
    assert all(g.bias_val == 0.0 for g in groups)