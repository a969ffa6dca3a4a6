"""Benchmark TextBuffer against plain string concatenation.

Simulates the builder's access pattern: many small appends, a trailing
separator stripped before each close, one final join.

Run:
    python -m benchmarks.buffer_vs_concat

"""

import statistics
import timeit

from reprkit.buffer import TextBuffer

FIELDS = 200
ROUNDS = 20


def with_buffer() -> str:
    buf = TextBuffer("Thing@1[")
    for i in range(FIELDS):
        buf.append("field").append(str(i)).append("=").append(str(i * i)).append(",")
    buf.remove_suffix(",")
    return buf.append("]").build()


def with_concat() -> str:
    out = "Thing@1["
    for i in range(FIELDS):
        out += "field" + str(i) + "=" + str(i * i) + ","
    if out.endswith(","):
        out = out[:-1]
    return out + "]"


def main() -> None:
    assert with_buffer() == with_concat()
    for name, func in (("TextBuffer", with_buffer), ("str +=", with_concat)):
        times = timeit.repeat(func, number=200, repeat=ROUNDS)
        print(f"{name:<12} median {statistics.median(times) * 1000:8.2f} ms / 200 renders")


if __name__ == "__main__":
    main()
