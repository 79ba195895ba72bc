import pytest
from pathlib import Path
import sys

ROOT = Path(__file__).resolve().parents[1]
sys.path.append(str(ROOT))

from escapetime.complex_arith import Complex
from escapetime.utils import parse_complex


@pytest.mark.parametrize("text, expected", [
    ("-0.75+0.1j", Complex(-0.75, 0.1)),
    ("0.3 - 0.5j", Complex(0.3, -0.5)),
    ("-0.4-0.6i", Complex(-0.4, -0.6)),
    ("0.5j", Complex(0.0, 0.5)),
    ("2", Complex(2.0, 0.0)),
    ("-1.5", Complex(-1.5, 0.0)),
])
def test_parse_complex(text, expected):
    assert parse_complex(text) == expected


@pytest.mark.parametrize("text", ["", "abc", "1+2k"])
def test_parse_complex_rejects_garbage(text):
    with pytest.raises(ValueError):
        parse_complex(text)
