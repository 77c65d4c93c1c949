import os
import runpy
import pytest


examplesDir = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "Examples")
exampleNames = sorted(name for name in os.listdir(examplesDir) if name.endswith(".py"))


def test_examples_found():
    assert "textEditor.py" in exampleNames


@pytest.mark.parametrize("exampleName", exampleNames)
def test_example(exampleName):
    # the examples check themselves with assert statements
    runpy.run_path(os.path.join(examplesDir, exampleName), run_name="__main__")
