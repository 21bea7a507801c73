"""Pytest configuration for minitrace tests.

This module provides shared fixtures for all test modules, including
Taichi initialization which must happen once per session.
"""

import pytest
import taichi as ti


@pytest.fixture(scope="session", autouse=True)
def init_taichi_session():
    """Initialize Taichi once for the entire test session.

    Using session scope prevents multiple ti.init() calls which can cause
    segmentation faults due to Taichi runtime conflicts.
    """
    ti.init(arch=ti.cpu, random_seed=42)
    yield


@pytest.fixture
def single_sphere_scene():
    """A unit sphere two units in front of the default camera."""
    from src.minitrace.scene.manager import Scene

    scene = Scene()
    scene.add_sphere(center=(0.0, 0.0, -2.0), radius=1.0, color=(220.0, 180.0, 70.0))
    return scene
