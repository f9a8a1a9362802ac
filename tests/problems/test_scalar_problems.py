from __future__ import annotations

import pytest

from metaswarm.problems import ScalarFirefly, ScalarParticle, polynomial


def test_polynomial_values():
    assert polynomial(0.0) == 1.0
    assert polynomial(1.0) == 1.0
    assert polynomial(2.0) == 1.0
    assert polynomial(1.64) == pytest.approx(1.62, abs=0.01)


def test_scalar_firefly_domain(scripted):
    assert ScalarFirefly.new_random(scripted([0.0])).position == -1.5
    assert ScalarFirefly.new_random(scripted([1.0])).position == 2.5
    a, b = ScalarFirefly(0.5), ScalarFirefly(-1.0)
    assert a.distance(b) == b.distance(a) == 1.5


def test_scalar_particle_initial_state(scripted):
    p = ScalarParticle.new_random(scripted([0.5]))
    assert p.position == 1.0
    assert p.velocity == 0.0
    assert p.personal_best == (1.0, polynomial(1.0))


def test_scalar_particle_ordering():
    assert ScalarParticle(1.6) > ScalarParticle(0.0)
    assert ScalarParticle(0.0) >= ScalarParticle(2.0)
