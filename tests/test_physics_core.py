"""Tests for physics_core.py - actor integration and pipe predicates."""
import math

import pytest

from flappy_glide.data_models import Actor, Obstacle


def make_pipe(x, gap_top=200.0, gap_height=150.0, width=52.0):
    return Obstacle(x=x, width=width, gap_top=gap_top, gap_bottom=gap_top + gap_height)


@pytest.mark.unit
class TestActorPhysics:
    """Gravity, glide and flap behavior."""

    def test_create_actor_at_center(self, core, config):
        actor = core.create_actor()

        assert actor.x == config.bird_x
        assert actor.y == config.screen_height / 2
        assert actor.velocity == 0.0

    def test_full_gravity_when_rising_or_still(self, core):
        actor = core.create_actor()
        start_y = actor.y

        core.step_actor(actor)

        assert actor.velocity == pytest.approx(0.5)
        assert actor.y == pytest.approx(start_y + 0.5)
        assert actor.gliding is False

    def test_glide_reduction_when_descending(self, core):
        actor = core.create_actor()
        actor.velocity = 1.0

        core.step_actor(actor)

        assert actor.velocity == pytest.approx(1.2)
        assert actor.gliding is True

    def test_rising_actor_gets_full_gravity(self, core):
        actor = core.create_actor()
        actor.velocity = -3.0

        core.step_actor(actor)

        assert actor.velocity == pytest.approx(-2.5)

    @pytest.mark.parametrize("velocity", [-20.0, -8.0, 0.0, 3.7, 15.0])
    def test_flap_overrides_velocity(self, core, velocity):
        actor = core.create_actor()
        actor.velocity = velocity

        core.flap(actor)

        assert actor.velocity == -8

    def test_flap_does_not_accumulate(self, core):
        actor = core.create_actor()

        core.flap(actor)
        core.flap(actor)

        assert actor.velocity == -8

    def test_respawn(self, core, config):
        actor = core.create_actor()
        actor.y = 12.0
        actor.velocity = 9.0
        actor.gliding = True

        core.respawn(actor)

        assert actor.y == config.respawn_y
        assert actor.velocity == 0.0
        assert actor.gliding is False

    @pytest.mark.parametrize("velocity,expected", [
        (0.0, 0.0),
        (4.0, 0.2),
        (-4.0, -0.2),
        (100.0, math.pi / 4),
        (-100.0, -0.5),
    ])
    def test_orientation_clamped(self, core, velocity, expected):
        assert core.orientation(velocity) == pytest.approx(expected)

    def test_out_of_bounds(self, core, config):
        actor = core.create_actor()
        assert not core.is_out_of_bounds(actor)

        actor.y = -actor.height / 2 - 0.1
        assert core.is_out_of_bounds(actor)

        actor.y = config.screen_height + actor.height / 2 + 0.1
        assert core.is_out_of_bounds(actor)

        # Partially visible still counts as on screen
        actor.y = 0.0
        assert not core.is_out_of_bounds(actor)


@pytest.mark.unit
class TestPipePredicates:
    """Collision, pass and removal predicates."""

    @pytest.fixture
    def actor(self):
        # Box spans x 145..175, y 262.5..287.5
        return Actor(x=160.0, y=275.0, width=30.0, height=25.0)

    def test_no_collision_inside_gap(self, core, actor):
        pipe = make_pipe(x=150.0, gap_top=200.0)

        assert not core.check_collision(actor, pipe)

    def test_collision_above_gap(self, core, actor):
        actor.y = 205.0

        assert core.check_collision(actor, make_pipe(x=150.0, gap_top=200.0))

    def test_collision_below_gap(self, core, actor):
        actor.y = 345.0

        assert core.check_collision(actor, make_pipe(x=150.0, gap_top=200.0))

    def test_flush_with_gap_edges_is_safe(self, core, actor):
        # Box exactly fills [gap_top, gap_bottom]
        pipe = Obstacle(x=150.0, width=52.0, gap_top=262.5, gap_bottom=287.5)

        assert not core.check_collision(actor, pipe)

    def test_no_collision_without_horizontal_overlap(self, core, actor):
        actor.y = 100.0

        assert not core.check_collision(actor, make_pipe(x=175.0))
        assert not core.check_collision(actor, make_pipe(x=93.0))
        assert core.check_collision(actor, make_pipe(x=174.0))

    def test_passed_once_left_edge_beyond_right_edge(self, core, actor):
        assert not core.has_passed(actor, make_pipe(x=93.0))
        assert core.has_passed(actor, make_pipe(x=92.0))

    def test_already_passed_pipe_not_counted_again(self, core, actor):
        pipe = make_pipe(x=0.0)
        pipe.passed = True

        assert not core.has_passed(actor, pipe)

    def test_off_screen_strictly_below_zero(self, core):
        assert not core.is_off_screen(make_pipe(x=-52.0))
        assert core.is_off_screen(make_pipe(x=-52.5))

    def test_views_copy_geometry(self, core, actor):
        actor.velocity = 4.0
        view = core.actor_view(actor)
        pipe_view = core.obstacle_view(make_pipe(x=10.0))

        assert view.y == actor.y
        assert view.angle == pytest.approx(0.2)
        assert pipe_view.gap_bottom - pipe_view.gap_top == 150.0


@pytest.mark.unit
class TestObstacleModel:

    def test_rejects_empty_gap(self):
        with pytest.raises(ValueError):
            Obstacle(x=0.0, width=52.0, gap_top=200.0, gap_bottom=200.0)

    def test_rejects_inverted_gap(self):
        with pytest.raises(ValueError):
            Obstacle(x=0.0, width=52.0, gap_top=300.0, gap_bottom=200.0)
