"""
Test Configuration File

Unified setup for Python path, avoiding sys.path.insert in each test file.
Provides the store, state, engine and seed theme fixtures shared by the
synthesis tests.
"""

import sys
from pathlib import Path

import pytest

# Add the src directory to the Python path
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

REPO_ROOT = Path(__file__).parent.parent


@pytest.fixture
def store():
    from core.variable_store import InMemoryVariableStore
    return InMemoryVariableStore()


@pytest.fixture
def state():
    from core.generation_state import GenerationState
    return GenerationState()


@pytest.fixture
def engine(store, state):
    from services.token_synthesis_service import TokenSynthesisService
    return TokenSynthesisService(store, state)


@pytest.fixture
def collection(store):
    collection = store.create_collection("SCS Primitive 1.0")
    store.rename_mode(collection, collection.default_mode_id, "Light")
    return collection


@pytest.fixture
def light_themes():
    """(brand, neutral, success, error) themes for the light appearance"""
    from core.scale_generator import SimpleScaleGenerator

    generator = SimpleScaleGenerator()
    return tuple(
        generator.generate("light", seed, "#CCCCCC", "#FFFFFF")
        for seed in ("#3B82F6", "#6B7280", "#10B981", "#EF4444")
    )


@pytest.fixture
def dark_themes():
    """(brand, neutral, success, error) themes for the dark appearance"""
    from core.scale_generator import SimpleScaleGenerator

    generator = SimpleScaleGenerator()
    return tuple(
        generator.generate("dark", seed, "#555555", "#1C1C1C")
        for seed in ("#3B82F6", "#6B7280", "#10B981", "#EF4444")
    )


@pytest.fixture(autouse=True)
def _isolate_config(tmp_path, monkeypatch):
    """Keep ConfigService away from the real user directory and reset its singleton"""
    from services.config_service import ConfigService

    base = tmp_path / "user-config"
    monkeypatch.setenv("APPDATA", str(base))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(base))
    monkeypatch.chdir(REPO_ROOT)
    ConfigService.reset_instance()
    yield
    ConfigService.reset_instance()
