"""Shared test fixtures."""

from __future__ import annotations

import os
import random

import pytest
from PIL import Image

from slideview.library import ImageLibrary
from slideview.order import ShuffleStore

IMAGE_NAMES = ["img1.jpg", "img2.png", "img10.gif", "img3.jpeg", "img20.jpg"]


def create_images(directory, names):
    """Write small real image files named ``names`` into ``directory``."""
    for name in names:
        path = os.path.join(directory, name)
        fmt = {'.png': 'PNG', '.gif': 'GIF'}.get(os.path.splitext(name)[1].lower(), 'JPEG')
        Image.new('RGB', (10, 10), (128, 128, 128)).save(path, format=fmt)


@pytest.fixture
def image_dir(tmp_path):
    """Directory holding five images with numbered names."""
    d = tmp_path / "images"
    d.mkdir()
    create_images(str(d), IMAGE_NAMES)
    return str(d)


@pytest.fixture
def save_dir(tmp_path):
    """Temporary directory for saved copies."""
    d = tmp_path / "saved"
    d.mkdir()
    return str(d)


@pytest.fixture
def library(image_dir, save_dir):
    return ImageLibrary.scan(image_dir, save_dir=save_dir)


@pytest.fixture
def store():
    """Store with a seeded RNG so shuffles are repeatable."""
    return ShuffleStore(rng=random.Random(1234))


@pytest.fixture
def make_images():
    """The ``create_images`` helper, for tests that build their own directory."""
    return create_images
