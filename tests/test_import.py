import importlib
import pathlib
import sys

import pytest

sys.path.insert(0, str(pathlib.Path(__file__).resolve().parents[1] / "src"))


def test_import_package():
    try:
        module = importlib.import_module("forestgraph")
    except ModuleNotFoundError as exc:  # pragma: no cover
        pytest.skip(f"Missing dependency: {exc.name}")
    for name in ("AdjacencyMatrixUndirectedGraph", "ForestDisjointSets", "KruskalMSP", "ConnectedComponentsComputer"):
        assert hasattr(module, name)


def test_unknown_attribute():
    module = importlib.import_module("forestgraph")
    with pytest.raises(AttributeError):
        module.DoesNotExist
