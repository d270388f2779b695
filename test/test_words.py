"""
Tests for the per-word closed-form solver.
"""

import math

import pytest

from dubins_path import DubinsWord, Pose, SegmentType, Tolerances, normalize_problem, solve_word, word_path
from dubins_path.geometry import DubinsProblem
from dubins_path.words import WORD_SOLVERS, solve_all


class TestWordTable:
    def test_canonical_order(self):
        assert [w.name for w in DubinsWord] == ["LSL", "RSR", "LSR", "RSL", "RLR", "LRL"]

    def test_every_word_has_solver(self):
        assert set(WORD_SOLVERS) == set(DubinsWord)

    def test_segments(self):
        assert DubinsWord.LSR.segments == (SegmentType.LEFT, SegmentType.STRAIGHT, SegmentType.RIGHT)
        assert DubinsWord.RLR.is_ccc and DubinsWord.LRL.is_ccc
        assert not DubinsWord.LSL.is_ccc

    def test_from_name(self):
        assert DubinsWord.from_name("rsl") is DubinsWord.RSL
        with pytest.raises(ValueError):
            DubinsWord.from_name("SSS")


class TestInfeasibleWords:
    """Tangent constructions that do not exist for the given geometry."""

    def test_overlapping_circles_rsl(self):
        radius = 0.5
        path = word_path(Pose(0, 0, math.pi / 2), Pose(radius, 0, math.pi / 2), radius, DubinsWord.RSL)
        assert path is None

    def test_overlapping_circles_lsr(self):
        radius = 0.5
        path = word_path(Pose(0, 0, math.pi / 2), Pose(-radius, 0, math.pi / 2), radius, DubinsWord.LSR)
        assert path is None

    def test_far_apart_circles_rlr(self):
        radius = 0.5
        path = word_path(Pose(0, 0, math.pi / 2), Pose(7 * radius, 0, math.pi / 2), radius, DubinsWord.RLR)
        assert path is None

    def test_far_apart_circles_lrl(self):
        radius = 0.5
        path = word_path(Pose(0, 0, math.pi / 2), Pose(-7 * radius, 0, math.pi / 2), radius, DubinsWord.LRL)
        assert path is None

    def test_ccc_infeasible_beyond_four_radii(self):
        pr = DubinsProblem(d=10.0, alpha=0.0, beta=0.0)
        assert solve_word(pr, DubinsWord.RLR) is None
        assert solve_word(pr, DubinsWord.LRL) is None


class TestTolerancePolicy:
    def test_round_off_radicand_is_clamped(self):
        # RSL with turning circles 2R apart, less a hair: the inner tangent has zero length
        pr = DubinsProblem(d=4.0 - 1e-12, alpha=math.pi / 2, beta=math.pi / 2)
        params = solve_word(pr, DubinsWord.RSL)
        assert params is not None
        assert params.second == 0.0
        assert params.first == pytest.approx(math.pi)
        assert params.third == pytest.approx(math.pi)

    def test_radicand_rejected_without_tolerance(self):
        pr = DubinsProblem(d=4.0 - 1e-12, alpha=math.pi / 2, beta=math.pi / 2)
        assert solve_word(pr, DubinsWord.RSL, Tolerances(sqrt=0.0)) is None

    @pytest.mark.parametrize("word", [DubinsWord.RLR, DubinsWord.LRL])
    def test_round_off_acos_argument_is_clamped(self, word):
        # turning circles a hair more than 4R apart: the middle circle just touches both
        pr = DubinsProblem(d=4.0 + 1e-12, alpha=0.0, beta=0.0)
        params = solve_word(pr, word)
        assert params is not None
        assert tuple(params) == pytest.approx((math.pi / 2, math.pi, math.pi / 2), abs=1e-6)

    @pytest.mark.parametrize("word", [DubinsWord.RLR, DubinsWord.LRL])
    def test_acos_argument_rejected_without_tolerance(self, word):
        pr = DubinsProblem(d=4.0 + 1e-12, alpha=0.0, beta=0.0)
        assert solve_word(pr, word, Tolerances(acos=0.0)) is None

    def test_near_full_loop_folds_to_zero(self):
        # the first LSL arc comes out as 2*pi - 1e-12
        pr = DubinsProblem(d=2.0, alpha=1e-12, beta=1e-12)
        params = solve_word(pr, DubinsWord.LSL)
        assert params.first == 0.0
        assert params.second == pytest.approx(2.0)
        assert params.third == pytest.approx(0.0, abs=1e-9)

    def test_near_full_loop_kept_without_tolerance(self):
        pr = DubinsProblem(d=2.0, alpha=1e-12, beta=1e-12)
        params = solve_word(pr, DubinsWord.LSL, Tolerances(arc=0.0))
        assert params.first == pytest.approx(2 * math.pi)

    def test_zero_tolerance_still_accepts_exact_boundary(self):
        pr = DubinsProblem(d=0.0, alpha=0.0, beta=0.0)
        params = solve_word(pr, DubinsWord.LSL, Tolerances(sqrt=0.0, acos=0.0, arc=0.0))
        assert params is not None
        assert tuple(params) == (0.0, 0.0, 0.0)

    def test_negative_tolerance_rejected(self):
        with pytest.raises(ValueError):
            Tolerances(sqrt=-1.0)


class TestClosedForms:
    def test_straight_line(self):
        pr = normalize_problem(Pose(0, 0, 0), Pose(10, 0, 0), 1.0)
        for word in (DubinsWord.LSL, DubinsWord.RSR):
            params = solve_word(pr, word)
            assert tuple(params) == pytest.approx((0.0, 10.0, 0.0), abs=1e-9)

    def test_points_rsr(self):
        radius = 0.5
        path = word_path(Pose(0, 0, math.pi / 2), Pose(0, 10, math.pi / 2), radius, DubinsWord.RSR)
        assert tuple(path.segments) == pytest.approx((0.0, 10.0, 0.0), abs=1e-9)
        first, _, last = path.segment_geometry()
        assert first.center == pytest.approx((0.5, 0.0))
        assert last.center == pytest.approx((0.5, 10.0))

    def test_points_lsl(self):
        radius = 0.5
        path = word_path(Pose(0, 0, math.pi / 2), Pose(0, 10, math.pi / 2), radius, DubinsWord.LSL)
        assert tuple(path.segments) == pytest.approx((0.0, 10.0, 0.0), abs=1e-9)
        first, straight, last = path.segment_geometry()
        assert first.center == pytest.approx((-0.5, 0.0))
        assert straight.center is None
        assert last.center == pytest.approx((-0.5, 10.0))

    def test_points_rlr(self):
        radius = 0.5
        path = word_path(Pose(0, 0, math.pi / 2), Pose(3, 0, 3 * math.pi / 2), radius, DubinsWord.RLR)
        assert tuple(path.segments) == pytest.approx((math.pi, math.pi, math.pi), abs=1e-7)
        centers = [seg.center for seg in path.segment_geometry()]
        assert centers[0] == pytest.approx((0.5, 0.0), abs=1e-7)
        assert centers[1] == pytest.approx((1.5, 0.0), abs=1e-7)
        assert centers[2] == pytest.approx((2.5, 0.0), abs=1e-7)

    def test_points_lrl(self):
        radius = 0.5
        path = word_path(Pose(0, 0, math.pi / 2), Pose(-3, 0, 3 * math.pi / 2), radius, DubinsWord.LRL)
        assert tuple(path.segments) == pytest.approx((math.pi, math.pi, math.pi), abs=1e-7)
        centers = [seg.center for seg in path.segment_geometry()]
        assert centers[0] == pytest.approx((-0.5, 0.0), abs=1e-7)
        assert centers[1] == pytest.approx((-1.5, 0.0), abs=1e-7)
        assert centers[2] == pytest.approx((-2.5, 0.0), abs=1e-7)

    def test_every_feasible_word_reaches_goal(self, random_path_configs):
        tolerance = 1e-6
        for i, (start, goal, radius) in enumerate(random_path_configs):
            pr = normalize_problem(start, goal, radius)
            for word, params in solve_all(pr).items():
                if params is None:
                    continue
                path = word_path(start, goal, radius, word)
                end = path.endpoint
                pos_err = math.hypot(end.x - goal.x, end.y - goal.y)
                head_err = abs(math.remainder(end.heading - goal.heading, 2 * math.pi))
                assert pos_err < tolerance * max(1.0, radius), f"Config {i}, {word}: position error {pos_err:.3e}"
                assert head_err < tolerance, f"Config {i}, {word}: heading error {head_err:.3e}"
