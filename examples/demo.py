"""
plainjson demonstration script.

Run with a path to a JSON file to also time 1000 parses of that file:

    python examples/demo.py data.json
"""

import sys
import time

import plainjson
from plainjson import Arr, Bool, Null, Num, Obj, Str


def serialization_demo():
    value = Obj({
        "arrayField": Arr((Str("abacaba"), Bool(False), Num(42))),
        "nullField": Null(),
    })
    print(f"JSON value = {plainjson.serialize(value)}")


def deserialization_demo():
    json_text = """{
            "arrayField": [
                "abacaba",
                false,
                42
            ],
            "nullField": null
        }"""

    value = plainjson.deserialize(json_text)
    if value is None:
        print("Failed to parse JSON value!")
        return
    print(f"Parsed JSON value (roundtrip) = {plainjson.serialize(value)}")


def file_benchmark(path, iterations=1000):
    try:
        with open(path, encoding="utf-8") as f:
            file_data = f.read()
    except OSError as e:
        print(f"Failed to read the file: {e}")
        return

    print("Starting...")
    start = time.perf_counter()

    for _ in range(iterations):
        if plainjson.deserialize(file_data) is None:
            print("Failed to deserialize the file as JSON!")
            return

    elapsed = time.perf_counter() - start
    print(f"Deserialization: {int(elapsed * 1_000_000)} us")
    print(f"Deserialization: {int(elapsed)} s")


def main():
    serialization_demo()
    deserialization_demo()

    if len(sys.argv) < 2:
        print("No file path is specified, can't run a benchmark!")
        return
    file_benchmark(sys.argv[1])


if __name__ == "__main__":
    main()
