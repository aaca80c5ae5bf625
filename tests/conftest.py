"""
HexCell Test Configuration

Shared pytest fixtures for all tests.
"""

import math

import numpy as np
import pytest

from hexcell.engine import H3Engine, RawBoundary

# 0x850dab63fffffff: resolution 5, base cell 6, hexagon
SAMPLE_INDEX = 0x850DAB63FFFFFFF
# 0x821c07fffffffff: resolution 2 pentagon
PENTAGON_INDEX = 0x821C07FFFFFFFFF
SAMPLE_LAT = 67.150926864
SAMPLE_LNG = -168.390888581


class FakeEngine:
    """
    Scripted GridEngine for failure-path tests

    Every call returns the value configured on the instance, so a test can
    force any sentinel the real engine would produce.
    """

    def __init__(self):
        self.valid = True
        self.index = SAMPLE_INDEX
        self.parsed = SAMPLE_INDEX
        self.parent = 0x840DAB7FFFFFFFF
        self.distance = 3
        self.pentagon = 0
        self.class3 = 1
        self.res = 5
        self.base_cell = 6
        self.centroid = (math.radians(10.0), math.radians(20.0))
        self.boundary = RawBoundary()
        self.text = b"850dab63fffffff"
        self.calls = []

    def index_for(self, lat_rad, lng_rad, res):
        self.calls.append(("index_for", lat_rad, lng_rad, res))
        return self.index

    def centroid_of(self, index):
        return self.centroid

    def boundary_of(self, index):
        return self.boundary

    def resolution_of(self, index):
        return self.res

    def base_cell_of(self, index):
        return self.base_cell

    def parse(self, text):
        self.calls.append(("parse", text))
        return self.parsed

    def format(self, index, buffer):
        buffer[: len(self.text)] = self.text

    def is_valid(self, index):
        return self.valid

    def is_pentagon(self, index):
        return self.pentagon

    def is_class3(self, index):
        return self.class3

    def grid_distance(self, a, b):
        return self.distance

    def parent_at(self, index, res):
        return self.parent


@pytest.fixture
def fake_engine():
    """Scripted engine returning success values until reconfigured"""
    return FakeEngine()


@pytest.fixture
def engine():
    """Real H3-backed engine"""
    return H3Engine()


@pytest.fixture
def sample_index():
    """Raw id of a resolution 5 hexagon in the Bering Strait"""
    return SAMPLE_INDEX


@pytest.fixture
def pentagon_index():
    """Raw id of a resolution 2 pentagon"""
    return PENTAGON_INDEX


def _make_raw_boundary(points_deg, garbage=True):
    raw = RawBoundary()
    if garbage:
        raw.verts[:] = 99.0
    raw.num_verts = len(points_deg)
    if points_deg:
        raw.verts[: len(points_deg)] = np.radians(np.asarray(points_deg, dtype=np.float64))
    return raw


@pytest.fixture
def make_raw_boundary():
    """Build a RawBoundary from degree pairs, optionally filling unused rows with junk"""
    return _make_raw_boundary
