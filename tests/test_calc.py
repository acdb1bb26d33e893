# SPDX-FileCopyrightText: 2025 ratlib contributors
# SPDX-License-Identifier: Apache-2.0

from ratlib.calc import main, evaluate
from ratlib import Rational as R, INT64_MAX
import pytest

def run(capsys, *argv):
    status = main(list(argv))
    captured = capsys.readouterr()
    return status, captured.out.strip(), captured.err.strip()

def test_evaluate():
    assert evaluate(["1/2"]) == R(1, 2)
    assert evaluate(["1 1/2", "+", "3/4"]) == R(9, 4)
    # Strictly left to right: (1/3 + 1/3) * 3
    assert evaluate(["1/3", "+", "1/3", "*", "3"]) == 2
    assert evaluate(["5", "x", "1/10"]) == R(1, 2)

def test_evaluate_errors():
    with pytest.raises(ValueError, match="Expected OPERAND"):
        evaluate(["1/2", "+"])
    with pytest.raises(ValueError, match="Unknown operator '%'"):
        evaluate(["1/2", "%", "3"])

def test_main(capsys):
    assert run(capsys, "1 1/2", "+", "3/4") == (0, "9/4", "")
    assert run(capsys, "-p", "1 1/2", "+", "3/4") == (0, "2 1/4", "")
    assert run(capsys, "1/3", "*", "6", "/", "-4") == (0, "-1/2", "")
    assert run(capsys, "--", "-1/2", "+", "1") == (0, "1/2", "")
    assert run(capsys, "-f", "1/8") == (0, "0.125", "")

def test_main_simplify(capsys):
    assert run(capsys, "6/8") == (0, "6/8", "")
    assert run(capsys, "-s", "6/8") == (0, "3/4", "")
    assert run(capsys, "-s", "-p", "0/8") == (0, "0", "")

def test_main_errors(capsys):
    status, out, err = run(capsys, "1/2", "/", "0")
    assert status == 1
    assert err == "error: Denominator cannot be zero."
    status, out, err = run(capsys, "half")
    assert status == 1
    assert err == "error: Value 'half' is not in the expected format."

def test_main_checked(capsys):
    status, out, err = run(capsys, str(INT64_MAX), "+", "1")
    assert status == 0
    assert out == f"{INT64_MAX + 1}/1"
    status, out, err = run(capsys, "-c", str(INT64_MAX), "+", "1")
    assert status == 1
    assert "exceeds the range" in err
