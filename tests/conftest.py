"""
Pytest configuration for test discovery, import path setup and shared
fixtures.

Ensures the project root is on sys.path so that `import autotag` works
regardless of how pytest is invoked (e.g., `pytest` or `pytest tests/`).
"""

import os
import sys
from typing import List

import pytest


def _ensure_project_root_on_sys_path(sys_path: List[str]) -> None:
    """
    Add the project root directory to sys.path if it is not already present.

    :param sys_path: The current Python sys.path list.
    :return: None
    """
    tests_dir = os.path.dirname(__file__)
    project_root = os.path.abspath(os.path.join(tests_dir, os.pardir))
    if project_root not in sys_path:
        sys_path.insert(0, project_root)


_ensure_project_root_on_sys_path(sys.path)

from autotag.core.sentence import Sentence, Token  # noqa: E402

SAMPLE_CONLLU = (
    "# sent_id = 1\n"
    "# text = Gallia est omnis divisa\n"
    "1\tGallia\tGallia\tPROPN\tNE\tCase=Nom|Number=Sing\t4\tnsubj:pass\t_\t_\n"
    "2\test\tsum\tAUX\tV\tMood=Ind|Number=Sing|Person=3\t4\taux:pass\t_\t_\n"
    "3\tomnis\tomnis\tDET\tA\tCase=Nom|Gender=Fem\t1\tdet\t_\t_\n"
    "4\tdivisa\tdivido\tVERB\tV\tAspect=Perf|VerbForm=Part\t0\troot\t_\tSpaceAfter=No\n"
    "\n"
    "# sent_id = 2\n"
    "1\tarma\tarma\tNOUN\tN\t_\t2\tobj\t_\t_\n"
    "2\tcano\tcano\tVERB\tV\tPerson=1\t0\troot\t_\tEmph|Gloss=sing\n"
    "\n"
)


@pytest.fixture
def annotated_token():
    """A token with tags, features and misc entries."""
    return Token(
        form="test",
        upos="CP",
        xpos="P",
        features={"c": "d", "a": "b"},
        misc={"u": "v", "x": "y"},
    )


@pytest.fixture
def annotated_sentence(annotated_token):
    """A single-token sentence around `annotated_token`."""
    return Sentence([annotated_token])


@pytest.fixture
def bare_sentence():
    """A single-token sentence without annotations."""
    return Sentence([Token(form="test")])


@pytest.fixture
def sample_conllu():
    return SAMPLE_CONLLU


@pytest.fixture
def conllu_file(tmp_path, sample_conllu):
    path = tmp_path / "sample.conllu"
    path.write_text(sample_conllu, encoding="utf-8")
    return path
