#!.venv/bin/python

# The shebang may point towards a venv, but CI executes python -m runtest

import importlib.util
import os
import subprocess
import sys
import traceback
import unittest

from test.runtime import ResultAdapter, StyledStream


if __name__ == "__main__":
    stream = sys.stdout
    styled = StyledStream(stream)

    def println(s: str = "") -> None:
        if s:
            stream.write(s)
        stream.write("\n")
        stream.flush()

    println(styled.h1("1. Setup"))
    println(styled.h2("Python"))
    println(f"{sys.executable}")
    println(sys.version)
    println(styled.h2("Python Path"))
    for path in sys.path:
        println(f"{path}")
    println(styled.h2("Current Directory"))
    println(f"{os.getcwd()}")
    println(styled.h2("matplotlib"))
    println("available" if importlib.util.find_spec("matplotlib") else "n/a")

    println(styled.h1("2. Type Checking"))
    if importlib.util.find_spec("pyright") is None:
        println("pyright is not installed; skipping")
    else:
        try:
            subprocess.run(
                [sys.executable, "-m", "pyright", "perceptualcolor"], check=True
            )
        except subprocess.CalledProcessError:
            println(styled.failure("perceptualcolor failed to type check!"))
            sys.exit(1)

    println(styled.h1("3. Unit Testing"))
    try:
        runner = unittest.main(
            module="test",
            exit=False,
            testRunner=unittest.TextTestRunner(
                stream=stream, resultclass=ResultAdapter  # type: ignore
            ),
        )
        sys.exit(not runner.result.wasSuccessful())
    except Exception as x:
        trace = traceback.format_exception(x)
        println("".join(trace[:-1]))
        println(styled.err(trace[-1]))
        sys.exit(1)
