"""Tests for the particle swarm engine."""

from __future__ import annotations

import math

import numpy as np
import pytest

from metaswarm import PSO, PSOConfig
from metaswarm.algorithm.pso import select_best
from metaswarm.foundation.exceptions import (
    CandidateContractError,
    InvalidHyperparameterError,
    InvalidPopulationSizeError,
    NonFiniteEvaluationError,
)
from metaswarm.problems import BoxParticle, ScalarParticle


def test_initial_particles_start_at_rest(scripted, quad_particle):
    swarm = PSO(quad_particle, 3, inertia=0.5, c_local=1.0, c_global=1.0, source=scripted([0.0, 0.5, 1.0]))
    for p in swarm.particles:
        assert p.velocity == 0.0
        assert p.personal_best == (p.position, p.evaluate())


def test_global_best_tie_prefers_later_index(scripted, quad_particle):
    # positions -1 and 1 both evaluate to -1
    swarm = PSO(quad_particle, 2, inertia=0.5, c_local=1.0, c_global=1.0, source=scripted([0.0, 1.0]))
    candidate, value = swarm.best
    assert value == -1.0
    assert candidate.position == 1.0


def test_select_best_is_left_to_right_max(quad_particle):
    particles = [quad_particle(0.5), quad_particle(-0.1), quad_particle(0.1), quad_particle(0.9)]
    best, value = select_best(particles)
    assert best is particles[2]
    assert value == pytest.approx(-0.01)


def test_best_is_a_snapshot(scripted, quad_particle):
    swarm = PSO(quad_particle, 2, inertia=0.5, c_local=1.0, c_global=1.0, source=scripted([0.0, 0.75]))
    snapshot, _ = swarm.best
    swarm.particles[1].position = 42.0
    assert snapshot.position == pytest.approx(0.5)
    assert swarm.best[0] is snapshot


def test_passes_are_population_wide_barriers(scripted, quad_particle):
    """Trace two steps by hand: positions, then velocities, then personal bests."""
    inertia, c_local, c_global = 0.5, 1.0, 0.8
    draws = [
        0.0, 0.75,  # init: positions -1.0 and 0.5; global best at 0.5
        0.5, 1.0, 0.25, 0.5,  # step 1 (r1, r2) for particle 0 then 1
        1.0, 0.0, 0.0, 0.0,  # step 2
    ]
    source = scripted(draws)
    swarm = PSO(quad_particle, 2, inertia=inertia, c_local=c_local, c_global=c_global, source=source)
    p0, p1 = swarm.particles

    assert swarm.update() is True  # positions unchanged, nothing beats -0.25
    assert p0.position == -1.0
    assert p0.velocity == pytest.approx((0.5 - -1.0) * c_global * 1.0)
    assert p1.velocity == 0.0

    assert swarm.update() is False
    assert p0.position == pytest.approx(0.2)
    # velocity pass sees the moved position but the personal best from before this step
    assert p0.velocity == pytest.approx(1.2 * inertia + (-1.0 - 0.2) * c_local * 1.0)
    assert p0.personal_best[0] == pytest.approx(0.2)
    assert p0.personal_best[1] == pytest.approx(-0.04)
    assert swarm.best[0].position == pytest.approx(0.2)
    assert swarm.best[1] == pytest.approx(-0.04)
    assert source.calls == len(draws)


def test_one_random_pair_per_particle(scripted):
    class NegSphere(BoxParticle):
        lower = (-1.0, -1.0, -1.0)
        upper = (1.0, 1.0, 1.0)

        def objective(self, x):
            return -float(np.sum(x**2))

    # init draws: particle 0 at (-1, -1, -1), particle 1 at the origin
    source = scripted([0.0, 0.0, 0.0, 0.5, 0.5, 0.5, 0.3, 0.6, 0.9, 0.2])
    swarm = PSO(NegSphere, 2, inertia=0.5, c_local=1.0, c_global=2.0, source=source)
    swarm.update()

    assert source.calls == 10
    velocity = swarm.particles[0].velocity
    assert np.allclose(velocity, np.full(3, 1.0 * 2.0 * 0.6))
    assert np.allclose(swarm.particles[1].velocity, 0.0)


def test_global_best_is_monotonic():
    swarm = PSO(ScalarParticle, 8, inertia=0.9, c_local=0.9, c_global=0.9, source=3)
    previous = swarm.best[1]
    for _ in range(40):
        swarm.update()
        assert swarm.best[1] >= previous
        previous = swarm.best[1]


def test_stagnation_flag_matches_population_max():
    swarm = PSO(ScalarParticle, 6, inertia=0.7, c_local=1.5, c_global=1.5, source=11)
    for _ in range(40):
        before = swarm.best[1]
        stagnated = swarm.update()
        current_max = max(p.evaluate() for p in swarm.particles)
        assert stagnated == (not current_max > before)
        if stagnated:
            assert swarm.best[1] == before
        else:
            assert swarm.best[1] == current_max


def test_stagnation_streak_counts_consecutive_steps(scripted, quad_particle):
    # a single particle at the optimum with zero velocity can never improve
    swarm = PSO(quad_particle, 1, inertia=0.5, c_local=1.0, c_global=1.0, source=scripted([0.5] * 7))
    assert swarm.update() is True
    assert swarm.update() is True
    assert swarm.update() is True
    assert swarm.stagnation_streak == 3
    assert swarm.step_count == 3


def test_scalar_benchmark_reaches_target():
    """8 particles, coefficients 0.9, 10 steps: the best value should exceed 1.5."""
    hits = 0
    for seed in range(20):
        swarm = PSO(ScalarParticle, 8, inertia=0.9, c_local=0.9, c_global=0.9, source=seed)
        for _ in range(10):
            swarm.update()
        if swarm.best[1] > 1.5:
            hits += 1
    assert hits >= 16


def test_zero_pull_velocity_decays_geometrically(quad_particle):
    inertia = 0.5
    swarm = PSO(quad_particle, 1, inertia=inertia, c_local=0.0, c_global=0.0, source=5)
    particle = swarm.particles[0]
    particle.velocity = 1.0
    start = particle.position

    positions = []
    for k in range(1, 60):
        swarm.update()
        assert abs(particle.velocity) <= inertia**k * 1.0 + 1e-15
        positions.append(particle.position)

    assert positions[-1] == pytest.approx(start + 1.0 / (1.0 - inertia))
    assert abs(positions[-1] - positions[-2]) < 1e-12


def test_nan_particles_never_selected(scripted, quad_particle):
    class NanAbove(quad_particle):
        def evaluate(self) -> float:
            return math.nan if self.position > 0.9 else -(self.position * self.position)

    swarm = PSO(NanAbove, 2, inertia=0.5, c_local=1.0, c_global=1.0, source=scripted([1.0, 0.5] + [0.5] * 4))
    assert swarm.best[0].position == 0.0
    assert swarm.update() is True
    assert swarm.best[1] == 0.0


def test_nan_personal_best_replaced_by_first_finite_value(scripted, quad_particle):
    class NanAbove(quad_particle):
        def evaluate(self) -> float:
            return math.nan if self.position > 0.9 else -(self.position * self.position)

    # particle 0 starts at 1.0 (NaN), particle 1 at 0.0
    swarm = PSO(NanAbove, 2, inertia=0.5, c_local=0.0, c_global=0.0, source=scripted([1.0, 0.5] + [0.5] * 8))
    first = swarm.particles[0]
    assert math.isnan(first.personal_best[1])
    first.velocity = -0.5

    swarm.update()
    assert first.position == pytest.approx(0.5)
    assert first.personal_best == (pytest.approx(0.5), pytest.approx(-0.25))

    swarm.update()
    assert first.position == pytest.approx(0.25)
    assert first.personal_best == (pytest.approx(0.25), pytest.approx(-0.0625))


def test_all_nan_population_fails_fast(quad_particle):
    class AlwaysNan(quad_particle):
        def evaluate(self) -> float:
            return math.nan

    with pytest.raises(NonFiniteEvaluationError):
        PSO(AlwaysNan, 4, inertia=0.5, c_local=1.0, c_global=1.0, source=0)


@pytest.mark.parametrize("pop_size", [0, -1, 3.0, None])
def test_invalid_population_size(pop_size, quad_particle):
    with pytest.raises(InvalidPopulationSizeError):
        PSO(quad_particle, pop_size, inertia=0.5, c_local=1.0, c_global=1.0)


@pytest.mark.parametrize("name", ["inertia", "c_local", "c_global"])
def test_non_finite_hyperparameter(name, quad_particle):
    params = {"inertia": 0.5, "c_local": 1.0, "c_global": 1.0, name: math.inf}
    with pytest.raises(InvalidHyperparameterError, match=name):
        PSO(quad_particle, 4, **params)


def test_unordered_candidate_rejected():
    class Unordered:
        position = 0.0
        velocity = 0.0
        personal_best = (0.0, 0.0)

        @classmethod
        def new_random(cls, source):
            return cls()

        def evaluate(self):
            return 0.0

    with pytest.raises(CandidateContractError, match="__ge__"):
        PSO(Unordered, 2, inertia=0.5, c_local=1.0, c_global=1.0)


def test_from_config(quad_particle):
    cfg = PSOConfig(pop_size=5, inertia=0.4, c_local=1.1, c_global=1.2)
    swarm = PSO.from_config(quad_particle, cfg, source=0)
    assert swarm.pop_size == 5
    assert swarm.cfg == cfg
    assert len(swarm.particles) == 5
