# escapetime/utils.py
from escapetime.complex_arith import Complex


def parse_complex(s: str) -> Complex:
    """
    Parse strings like '-0.75+0.1j' or '-0.4-0.6j' into a Complex.
    Plain real numbers are accepted too.
    """
    s = s.strip().lower().replace(" ", "")
    if not s:
        raise ValueError("empty complex literal")
    if s.endswith("j") or s.endswith("i"):
        return Complex.from_complex(complex(s[:-1] + "j"))
    return Complex(float(s), 0.0)
